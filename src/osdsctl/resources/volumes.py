"""Volume operations."""

from __future__ import annotations

from ..exceptions import UnexpectedResponseError
from ..model import VolumeSpec
from .base import ResourceBase

VOLUMES_PATH = "/block/volumes"


class VolumesResource(ResourceBase):
    """Interact with OpenSDS block volumes."""

    def create(self, spec: VolumeSpec) -> VolumeSpec:
        return VolumeSpec.from_payload(self._post(VOLUMES_PATH, spec.to_payload()))

    def get(self, volume_id: str) -> VolumeSpec:
        return VolumeSpec.from_payload(self._get(f"{VOLUMES_PATH}/{volume_id}"))

    def list(self) -> list[VolumeSpec]:
        payload = self._get(VOLUMES_PATH)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise UnexpectedResponseError(
                f"Expected a list of volumes, got {type(payload).__name__}", details=payload
            )
        return [VolumeSpec.from_payload(item) for item in payload]

    def delete(self, volume_id: str, spec: VolumeSpec) -> None:
        """Delete a volume; `spec` carries the profile the controller checks against."""

        self._delete(f"{VOLUMES_PATH}/{volume_id}", spec.to_payload())

    def update(self, volume_id: str, spec: VolumeSpec) -> VolumeSpec:
        return VolumeSpec.from_payload(self._put(f"{VOLUMES_PATH}/{volume_id}", spec.to_payload()))

"""Volume record exchanged with the OpenSDS API."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .exceptions import UnexpectedResponseError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def attribute_name(key: str) -> str:
    """Translate a display key such as `AvailabilityZone` to `availability_zone`."""

    return _CAMEL_BOUNDARY.sub("_", key).lower()


def wire_name(attribute: str) -> str:
    """Translate `availability_zone` to the JSON key `availabilityZone`."""

    head, *rest = attribute.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(slots=True)
class VolumeSpec:
    """A volume as requested from, or reported by, the OpenSDS controller.

    Zero values (empty strings, `0`, empty metadata) mean "not set" and are
    left out of request bodies.
    """

    id: str = ""
    created_at: str = ""
    updated_at: str = ""
    name: str = ""
    description: str = ""
    size: int = 0
    availability_zone: str = ""
    status: str = ""
    pool_id: str = ""
    profile_id: str = ""
    metadata: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for a request, omitting zero-valued fields."""

        payload: dict[str, Any] = {}
        for spec_field in fields(self):
            value = getattr(self, spec_field.name)
            if value in ("", 0, None) or value == {}:
                continue
            payload[wire_name(spec_field.name)] = value
        return payload

    def to_dict(self) -> dict[str, Any]:
        return {wire_name(spec_field.name): getattr(self, spec_field.name) for spec_field in fields(self)}

    def get(self, key: str) -> Any:
        return getattr(self, attribute_name(key), None)

    @classmethod
    def from_payload(cls, payload: Any) -> VolumeSpec:
        if not isinstance(payload, Mapping):
            raise UnexpectedResponseError(
                f"Expected a volume object, got {type(payload).__name__}", details=payload
            )
        values: dict[str, Any] = {}
        for spec_field in fields(cls):
            key = wire_name(spec_field.name)
            if payload.get(key) is None:
                continue
            values[spec_field.name] = payload[key]
        try:
            values["size"] = int(values.get("size", 0))
        except (TypeError, ValueError) as exc:
            raise UnexpectedResponseError(
                f"Volume size is not an integer: {values.get('size')!r}", details=payload
            ) from exc
        metadata = values.get("metadata", {})
        if not isinstance(metadata, Mapping):
            raise UnexpectedResponseError("Volume metadata is not an object", details=payload)
        values["metadata"] = {str(k): str(v) for k, v in metadata.items()}
        return cls(**values)

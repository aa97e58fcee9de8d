"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import OpenSDSClient


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: OpenSDSClient) -> None:
        self._client = client

    def _get(self, path: str) -> Any:
        return self._client.request("GET", path)

    def _post(self, path: str, payload: Mapping[str, Any]) -> Any:
        return self._client.request("POST", path, json_payload=payload)

    def _put(self, path: str, payload: Mapping[str, Any]) -> Any:
        return self._client.request("PUT", path, json_payload=payload)

    def _delete(self, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        return self._client.request("DELETE", path, json_payload=payload)

"""Configuration helpers for the OpenSDS client."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ENDPOINT = "http://localhost:50040"
DEFAULT_API_VERSION = "v1beta"


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `OpenSDSClient`."""

    endpoint: str = DEFAULT_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    verify_ssl: bool | str = True
    timeout: float = 30.0

    def resolved_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def api_root(self) -> str:
        return f"{self.endpoint.rstrip('/')}/{self.api_version.strip('/')}"

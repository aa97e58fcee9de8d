"""High-level OpenSDS REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .config import DEFAULT_API_VERSION, DEFAULT_ENDPOINT, ClientConfig
from .exceptions import RequestError
from .http import send
from .resources import VolumesResource


logger = logging.getLogger(__name__)


class OpenSDSClient:
    """Wrap OpenSDS REST endpoints with helper methods."""

    def __init__(
        self,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        api_version: str = DEFAULT_API_VERSION,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.config = ClientConfig(
            endpoint=endpoint.rstrip("/"),
            api_version=api_version,
            verify_ssl=verify_ssl,
            timeout=timeout,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.volumes = VolumesResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> OpenSDSClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        json_payload: Mapping[str, Any] | None = None,
    ) -> Any:
        url = self._resolve_url(path)
        headers = self._prepare_headers()
        self._log_request(method, url)
        return self._perform_request(
            method,
            url,
            headers=headers,
            json_payload=json_payload,
        )

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        return f"{self.config.api_root()}/{path.lstrip('/')}"

    def _prepare_headers(self) -> MutableMapping[str, str]:
        return self.config.resolved_headers()

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        headers: MutableMapping[str, str],
        json_payload: Mapping[str, Any] | None,
    ) -> Any:
        try:
            return send(
                self._session,
                method,
                url,
                headers=headers,
                json_payload=json_payload,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with OpenSDS API: {reason}", details=reason
            ) from exc

    def _log_request(self, method: str, url: str) -> None:
        logger.info("OpenSDS request %s %s", method.upper(), url)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)

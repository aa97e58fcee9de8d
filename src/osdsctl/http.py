"""HTTP helpers for the OpenSDS REST API.

OpenSDS answers failures with a JSON body of the form
``{"code": <int>, "message": <str>}``; successful calls return a JSON object,
a JSON list, or (for deletes) an empty body.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from requests import Response, Session

from .exceptions import RequestError, UnexpectedResponseError


def error_body(response: Response) -> dict[str, Any] | None:
    """Return the `{"code", "message"}` error object, if the server sent one."""

    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, Mapping) and body.get("message"):
        return dict(body)
    return None


def raise_for_error(response: Response) -> None:
    """Raise `RequestError` for any non-2xx response."""

    if 200 <= response.status_code < 300:
        return
    body = error_body(response)
    if body is not None:
        message = str(body["message"])
        details: Any = body
    else:
        text = response.text[:200]
        message = text or response.reason or "no response body"
        details = text or None
    raise RequestError(
        f"OpenSDS API error {response.status_code}: {message}",
        status_code=response.status_code,
        details=details,
    )


def decode_body(response: Response) -> Any:
    """Return the decoded JSON payload, or None when the body is empty."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            f"OpenSDS API returned a non-JSON body (status {response.status_code})",
            status_code=response.status_code,
            details=response.text[:200],
        ) from exc


def send(
    session: Session,
    method: str,
    url: str,
    *,
    headers: MutableMapping[str, str],
    json_payload: Mapping[str, Any] | None = None,
    timeout: float | None = None,
    verify: bool | str = True,
) -> Any:
    """Perform one request and return its decoded payload."""

    response = session.request(
        method=method,
        url=url,
        headers=headers,
        json=json_payload,
        timeout=timeout,
        verify=verify,
    )
    raise_for_error(response)
    return decode_body(response)

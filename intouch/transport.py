"""
Authenticated HTTP transport.

One ``IntouchHttpClient`` wraps one ``httpx.AsyncClient`` and is shared by every
facade of an ``Intouch`` instance, so connections and the digest challenge state
are reused across calls. ``httpx.AsyncClient`` supports concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from intouch.errors import TransportError
from intouch.urls import redact_url

logger = logging.getLogger(__name__)

_SECRET_KEYS = frozenset({"login_api", "password_api", "otp"})
_AUTH_FAILURE_STATUSES = frozenset({401, 407})


def redact_payload(payload: Any) -> Any:
    """Copy of a JSON body with credential and OTP values masked, for logging."""
    if isinstance(payload, dict):
        return {k: ("***" if k in _SECRET_KEYS else redact_payload(v)) for k, v in payload.items()}
    return payload


def build_auth(scheme: str, username: str, password: str) -> httpx.Auth:
    if scheme == "digest":
        return httpx.DigestAuth(username, password)
    if scheme == "basic":
        return httpx.BasicAuth(username, password)
    raise ValueError(f"Unsupported auth scheme '{scheme}'. Expected 'basic' or 'digest'.")


class IntouchHttpClient:
    def __init__(
        self,
        username: str,
        password: str,
        *,
        auth_scheme: str = "basic",
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.auth_scheme = auth_scheme
        self.timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            auth=build_auth(auth_scheme, username, password),
            timeout=timeout_seconds,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def request_json(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send ``payload`` as JSON and return the decoded JSON body.

        A non-2xx answer whose body is a JSON object is returned like a success:
        the gateway reports errors in the same envelope. Any other non-2xx answer
        raises ``TransportError``, as does a rejected authentication (401/407).
        """
        safe_url = redact_url(url)
        logger.debug("Intouch %s %s body=%s", method, safe_url, redact_payload(payload))
        try:
            response = await self._client.request(method, url, json=payload)
        except httpx.HTTPError as exc:
            logger.error("Request error calling Intouch %s %s: %s", method, safe_url, exc)
            raise TransportError(f"{method} {safe_url} failed: {exc}") from exc

        logger.debug("Intouch %s %s -> HTTP %s", method, safe_url, response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None
            if response.is_success:
                logger.error("Intouch %s %s returned a non-JSON body", method, safe_url)
                raise TransportError(
                    f"{method} {safe_url} returned a non-JSON body",
                    status_code=response.status_code,
                    body=response.text,
                ) from None

        if not response.is_success:
            if isinstance(data, dict) and response.status_code not in _AUTH_FAILURE_STATUSES:
                # error envelope, same shape as a success body
                logger.warning(
                    "Intouch %s %s answered HTTP %s: %s",
                    method,
                    safe_url,
                    response.status_code,
                    data.get("message") or data.get("detailMessage"),
                )
                return data
            logger.error("HTTP error from Intouch %s %s: %s %s", method, safe_url, response.status_code, response.text)
            raise TransportError(
                f"{method} {safe_url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=data if data is not None else response.text,
            )
        return data

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "IntouchHttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

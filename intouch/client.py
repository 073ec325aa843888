"""
Entry point for the Intouch gateway client.

Usage:
    async with Intouch.from_env() as intouch:
        balance = await intouch.balance.get()
        await intouch.cashin.om_ci({...})
        await intouch.cashout.wave_ci({...})
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from intouch.config import IntouchConfig, ensure_complete, resolve_config
from intouch.operations import IntouchBalance, IntouchCashin, IntouchCashout
from intouch.transport import IntouchHttpClient

logger = logging.getLogger(__name__)


class Intouch:
    """
    Groups the ``balance``, ``cashin`` and ``cashout`` facades around one
    authenticated HTTP client.

    Parameters
    ----------
    config : IntouchConfig
        Complete credentials. Missing values raise ``ConfigurationError`` here,
        before any HTTP client exists.
    transport : httpx.AsyncBaseTransport, optional
        Custom httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(self, config: IntouchConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = ensure_complete(config)

        self._http = IntouchHttpClient(
            config.username,
            config.password,
            auth_scheme=config.auth_scheme,
            timeout_seconds=config.timeout_seconds,
            transport=transport,
        )
        self.balance = IntouchBalance(
            config.agent_code,
            config.partner_id,
            config.login_api,
            config.password_api,
            self._http,
        )
        self.cashin = IntouchCashin(
            config.agent_code,
            config.partner_id,
            config.login_api,
            config.password_api,
            self._http,
            url_with_credentials=config.cashin_url_with_credentials,
        )
        self.cashout = IntouchCashout(
            config.agent_code,
            config.login_api,
            config.password_api,
            self._http,
            config.partner_name,
        )
        logger.info(
            "Intouch client initialised (agent=%s, auth=%s, timeout=%ss)",
            config.agent_code,
            config.auth_scheme,
            config.timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        config: Optional[IntouchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **params: Any,
    ) -> "Intouch":
        """
        Build a client from ``config``, then keyword ``params``, then the environment.

        ``env`` replaces ``os.environ`` (and disables ``.env`` loading) when given.
        """
        return cls(resolve_config(config, env=env, **params), transport=transport)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "Intouch":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

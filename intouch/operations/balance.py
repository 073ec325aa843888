"""
Balance inquiry for the partner account.
"""

from __future__ import annotations

import logging

from intouch.contracts import BalanceResponse, validate_response
from intouch.transport import IntouchHttpClient
from intouch.urls import build_balance_url

logger = logging.getLogger(__name__)


class IntouchBalance:
    def __init__(
        self,
        agent_code: str,
        partner_id: str,
        login_api: str,
        password_api: str,
        http: IntouchHttpClient,
    ) -> None:
        self._agent_code = agent_code
        self._partner_id = partner_id
        self._login_api = login_api
        self._password_api = password_api
        self._http = http

    async def get(self) -> BalanceResponse:
        """Fetch the current partner balance."""
        logger.info("Requesting Intouch balance for agent %s", self._agent_code)
        raw = await self._http.request_json(
            "POST",
            build_balance_url(self._agent_code),
            {
                "partner_id": self._partner_id,
                "login_api": self._login_api,
                "password_api": self._password_api,
            },
        )
        return validate_response(BalanceResponse, raw, operation="balance")

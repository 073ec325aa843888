"""
Cash-in: credit a subscriber wallet from the partner account.

Each operator method fills in the partner credentials and the operator's
``service_id``; anything the caller passed under those keys is overwritten.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from intouch.contracts import (
    CASHIN_REQUEST_MODELS,
    CashinResponse,
    CashinServiceCode,
    Operator,
    resolve_operator,
    validate_request,
    validate_response,
)
from intouch.transport import IntouchHttpClient
from intouch.urls import build_cashin_url

logger = logging.getLogger(__name__)


class IntouchCashin:
    def __init__(
        self,
        agent_code: str,
        partner_id: str,
        login_api: str,
        password_api: str,
        http: IntouchHttpClient,
        *,
        url_with_credentials: bool = False,
    ) -> None:
        self._agent_code = agent_code
        self._partner_id = partner_id
        self._login_api = login_api
        self._password_api = password_api
        self._http = http
        self._url_with_credentials = url_with_credentials

    async def om_ci(self, data: Mapping[str, Any]) -> CashinResponse:
        """Orange Money Côte d'Ivoire."""
        return await self.send(Operator.OM_CI, data)

    async def moov_ci(self, data: Mapping[str, Any]) -> CashinResponse:
        """Moov Côte d'Ivoire."""
        return await self.send(Operator.MOOV_CI, data)

    async def mtn_ci(self, data: Mapping[str, Any]) -> CashinResponse:
        """MTN Côte d'Ivoire."""
        return await self.send(Operator.MTN_CI, data)

    async def wave_ci(self, data: Mapping[str, Any]) -> CashinResponse:
        """Wave Côte d'Ivoire."""
        return await self.send(Operator.WAVE_CI, data)

    async def send(self, operator: Union[Operator, str], data: Mapping[str, Any]) -> CashinResponse:
        """
        Run a cash-in for ``operator``.

        Args:
            operator: target operator, e.g. ``Operator.OM_CI`` or ``"OM_CI"``
            data: ``recipient_phone_number``, ``amount``, ``partner_transaction_id``
                and ``call_back_url``

        Raises:
            RequestValidationError: ``data`` does not satisfy the operator schema
            TransportError: the HTTP call failed
            ResponseValidationError: the gateway body has an unknown shape
        """
        operator = resolve_operator(operator, family="cashin")
        operation = f"cashin.{operator.value}"
        payload = {
            **data,
            "service_id": CashinServiceCode[operator.name].value,
            "partner_id": self._partner_id,
            "login_api": self._login_api,
            "password_api": self._password_api,
        }
        request = validate_request(CASHIN_REQUEST_MODELS[operator], payload, operation=operation)

        url = build_cashin_url(
            self._agent_code,
            self._login_api,
            self._password_api,
            with_credentials=self._url_with_credentials,
        )
        logger.info(
            "Cash-in %s partner_transaction_id=%s amount=%s",
            operator.value,
            request.partner_transaction_id,
            request.amount,
        )
        raw = await self._http.request_json("POST", url, request.model_dump(mode="json"))
        response = validate_response(CashinResponse, raw, operation=operation)
        logger.info(
            "Cash-in %s partner_transaction_id=%s -> status=%s",
            operator.value,
            request.partner_transaction_id,
            response.status.value if response.status else response.message,
        )
        return response

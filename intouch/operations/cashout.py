"""
Cash-out: merchant payment debited from a subscriber wallet.

Requests go to the TouchPay transaction endpoint with PUT. The Wave flow
redirects the payer, so its ``additionnalInfos`` also carry the partner name and
the return/cancel URLs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from intouch.contracts import (
    CASHOUT_REQUEST_MODELS,
    CashoutResponse,
    CashoutServiceCode,
    Operator,
    resolve_operator,
    validate_request,
    validate_response,
)
from intouch.transport import IntouchHttpClient
from intouch.urls import build_transaction_url

logger = logging.getLogger(__name__)


class IntouchCashout:
    def __init__(
        self,
        agent_code: str,
        login_agent: str,
        password_agent: str,
        http: IntouchHttpClient,
        partner_name: str,
    ) -> None:
        self._agent_code = agent_code
        self._login_agent = login_agent
        self._password_agent = password_agent
        self._http = http
        self._partner_name = partner_name

    async def om_ci(self, data: Mapping[str, Any]) -> CashoutResponse:
        """Orange Money Côte d'Ivoire. ``additionnalInfos.otp`` is required."""
        return await self.send(Operator.OM_CI, data)

    async def moov_ci(self, data: Mapping[str, Any]) -> CashoutResponse:
        return await self.send(Operator.MOOV_CI, data)

    async def mtn_ci(self, data: Mapping[str, Any]) -> CashoutResponse:
        return await self.send(Operator.MTN_CI, data)

    async def wave_ci(self, data: Mapping[str, Any]) -> CashoutResponse:
        """Wave Côte d'Ivoire. ``callback`` also becomes the return/cancel URL."""
        return await self.send(Operator.WAVE_CI, data)

    async def send(self, operator: Union[Operator, str], data: Mapping[str, Any]) -> CashoutResponse:
        operator = resolve_operator(operator, family="cashout")
        operation = f"cashout.{operator.value}"
        payload: Dict[str, Any] = {**data, "serviceCode": CashoutServiceCode[operator.name].value}
        if operator is Operator.WAVE_CI:
            payload["additionnalInfos"] = self._wave_additionnal_infos(data)

        request = validate_request(CASHOUT_REQUEST_MODELS[operator], payload, operation=operation)

        logger.info(
            "Cash-out %s idFromClient=%s amount=%s",
            operator.value,
            request.idFromClient,
            request.amount,
        )
        raw = await self._http.request_json(
            "PUT",
            build_transaction_url(self._agent_code, self._login_agent, self._password_agent),
            request.model_dump(mode="json"),
        )
        response = validate_response(CashoutResponse, raw, operation=operation)
        logger.info(
            "Cash-out %s idFromClient=%s -> status=%s",
            operator.value,
            request.idFromClient,
            response.status.value if response.status else response.message,
        )
        return response

    def _wave_additionnal_infos(self, data: Mapping[str, Any]) -> Any:
        infos = data.get("additionnalInfos")
        if infos is None:
            infos = {}
        elif not isinstance(infos, Mapping):
            # left as-is so validation reports the type error
            return infos

        rewritten = {**infos, "partner_name": self._partner_name}
        callback = data.get("callback")
        if callback is not None:
            rewritten["return_url"] = callback
            rewritten["cancel_url"] = callback
        return rewritten

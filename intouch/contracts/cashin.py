"""
Cash-in contracts.

A cash-in pushes funds from the partner account into a subscriber wallet.
Every operator shares the same body; only the ``service_id`` literal differs.
"""

from __future__ import annotations

from typing import Dict, Literal, Optional, Type

from pydantic import StrictStr

from .common import BaseResponse, CashinServiceCode, Operator, PositiveAmount, RequestModel, UrlStr


class BaseCashinRequest(RequestModel):
    service_id: StrictStr
    recipient_phone_number: StrictStr
    amount: PositiveAmount
    partner_id: StrictStr
    partner_transaction_id: StrictStr
    login_api: StrictStr
    password_api: StrictStr
    call_back_url: UrlStr


class OMCICashinRequest(BaseCashinRequest):
    service_id: Literal["CASHINOMCIPART"]


class MoovCICashinRequest(BaseCashinRequest):
    service_id: Literal["CASHINMOOVPART"]


class MTNCICashinRequest(BaseCashinRequest):
    service_id: Literal["CASHINMTNPART"]


class WaveCICashinRequest(BaseCashinRequest):
    service_id: Literal["CI_CASHIN_WAVE_PART"]


class CashinResponse(BaseResponse):
    serviceCode: Optional[CashinServiceCode] = None


CASHIN_REQUEST_MODELS: Dict[Operator, Type[BaseCashinRequest]] = {
    Operator.OM_CI: OMCICashinRequest,
    Operator.MOOV_CI: MoovCICashinRequest,
    Operator.MTN_CI: MTNCICashinRequest,
    Operator.WAVE_CI: WaveCICashinRequest,
}

"""
Cash-out contracts.

A cash-out is a merchant payment debited from the subscriber wallet. The body
carries an ``additionnalInfos`` block (the gateway's spelling) whose extra keys
depend on the operator:
- Orange Money needs the subscriber's one-time password
- Wave needs the partner name and the return/cancel redirect URLs
"""

from __future__ import annotations

from typing import Dict, Literal, Optional, Type

from pydantic import StrictStr

from .common import (
    BaseResponse,
    CashoutServiceCode,
    EmailStr,
    Operator,
    PositiveAmount,
    RequestModel,
    UrlStr,
)


class BaseCashoutAdditionnalInfos(RequestModel):
    recipientEmail: EmailStr
    recipientFirstName: StrictStr
    recipientLastName: StrictStr
    destinataire: StrictStr


class OMCICashoutAdditionnalInfos(BaseCashoutAdditionnalInfos):
    otp: StrictStr


class WaveCICashoutAdditionnalInfos(BaseCashoutAdditionnalInfos):
    partner_name: StrictStr
    return_url: UrlStr
    cancel_url: UrlStr


class BaseCashoutRequest(RequestModel):
    idFromClient: StrictStr
    amount: PositiveAmount
    callback: UrlStr
    recipientNumber: StrictStr
    additionnalInfos: BaseCashoutAdditionnalInfos
    serviceCode: StrictStr


class OMCICashoutRequest(BaseCashoutRequest):
    additionnalInfos: OMCICashoutAdditionnalInfos
    serviceCode: Literal["PAIEMENTMARCHANDOMPAYCIDIRECT"]


class MoovCICashoutRequest(BaseCashoutRequest):
    serviceCode: Literal["PAIEMENTMARCHAND_MOOV_CI"]


class MTNCICashoutRequest(BaseCashoutRequest):
    serviceCode: Literal["PAIEMENTMARCHAND_MTN_CI"]


class WaveCICashoutRequest(BaseCashoutRequest):
    additionnalInfos: WaveCICashoutAdditionnalInfos
    serviceCode: Literal["CI_PAIEMENTWAVE_TP"]


class CashoutResponse(BaseResponse):
    serviceCode: Optional[CashoutServiceCode] = None


CASHOUT_REQUEST_MODELS: Dict[Operator, Type[BaseCashoutRequest]] = {
    Operator.OM_CI: OMCICashoutRequest,
    Operator.MOOV_CI: MoovCICashoutRequest,
    Operator.MTN_CI: MTNCICashoutRequest,
    Operator.WAVE_CI: WaveCICashoutRequest,
}

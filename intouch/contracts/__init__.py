"""
Contracts (data models).

Request and response shapes for the Intouch gateway. Operation facades validate
both directions against these models, so callers never receive a body the client
does not recognise and the gateway never receives one it would reject.
"""

from .cashin import (
    CASHIN_REQUEST_MODELS,
    BaseCashinRequest,
    CashinResponse,
    MoovCICashinRequest,
    MTNCICashinRequest,
    OMCICashinRequest,
    WaveCICashinRequest,
)
from .cashout import (
    CASHOUT_REQUEST_MODELS,
    BaseCashoutAdditionnalInfos,
    BaseCashoutRequest,
    CashoutResponse,
    MoovCICashoutRequest,
    MTNCICashoutRequest,
    OMCICashoutAdditionnalInfos,
    OMCICashoutRequest,
    WaveCICashoutAdditionnalInfos,
    WaveCICashoutRequest,
)
from .common import (
    BalanceResponse,
    BaseResponse,
    CashinServiceCode,
    CashoutServiceCode,
    Operator,
    TransactionStatus,
    resolve_operator,
    validate_request,
    validate_response,
)

__all__ = [
    "CASHIN_REQUEST_MODELS",
    "CASHOUT_REQUEST_MODELS",
    "BalanceResponse",
    "BaseCashinRequest",
    "BaseCashoutAdditionnalInfos",
    "BaseCashoutRequest",
    "BaseResponse",
    "CashinResponse",
    "CashinServiceCode",
    "CashoutResponse",
    "CashoutServiceCode",
    "MoovCICashinRequest",
    "MoovCICashoutRequest",
    "MTNCICashinRequest",
    "MTNCICashoutRequest",
    "OMCICashinRequest",
    "OMCICashoutAdditionnalInfos",
    "OMCICashoutRequest",
    "Operator",
    "TransactionStatus",
    "WaveCICashinRequest",
    "WaveCICashoutAdditionnalInfos",
    "WaveCICashoutRequest",
    "resolve_operator",
    "validate_request",
    "validate_response",
]

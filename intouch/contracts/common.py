"""
Shared contract pieces: enums, field types, the response envelope and the
helpers that turn pydantic failures into Intouch errors.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Annotated, Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import urlsplit

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, StrictStr, ValidationError

from intouch.errors import RequestValidationError, ResponseValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Operator(str, Enum):
    OM_CI = "OM_CI"
    MOOV_CI = "MOOV_CI"
    MTN_CI = "MTN_CI"
    WAVE_CI = "WAVE_CI"


class TransactionStatus(str, Enum):
    SUCCESSFUL = "SUCCESSFUL"
    INITIATED = "INITIATED"
    PENDING = "PENDING"


class CashinServiceCode(str, Enum):
    OM_CI = "CASHINOMCIPART"
    MOOV_CI = "CASHINMOOVPART"
    MTN_CI = "CASHINMTNPART"
    WAVE_CI = "CI_CASHIN_WAVE_PART"


class CashoutServiceCode(str, Enum):
    OM_CI = "PAIEMENTMARCHANDOMPAYCIDIRECT"
    MOOV_CI = "PAIEMENTMARCHAND_MOOV_CI"
    MTN_CI = "PAIEMENTMARCHAND_MTN_CI"
    WAVE_CI = "CI_PAIEMENTWAVE_TP"


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError("must be a valid http(s) URL")
    return value


def _check_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise ValueError("must be a valid email address")
    return value


def _check_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if not math.isfinite(value):
        raise ValueError("must be a finite number")
    return value


def _check_positive(value: Union[int, float]) -> Union[int, float]:
    if not value > 0:
        raise ValueError("must be greater than 0")
    return value


UrlStr = Annotated[StrictStr, AfterValidator(_check_url)]
EmailStr = Annotated[StrictStr, AfterValidator(_check_email)]
Number = Annotated[Union[int, float], BeforeValidator(_check_number)]
PositiveAmount = Annotated[Union[int, float], BeforeValidator(_check_number), AfterValidator(_check_positive)]


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------

class BaseResponse(BaseModel):
    """
    Envelope shared by cash-in and cash-out answers.

    Success and error bodies use the same shape: a success usually carries
    ``status``, an error usually carries only ``message``. Unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")

    status: Optional[TransactionStatus] = None
    message: Optional[StrictStr] = None
    idFromClient: Optional[StrictStr] = None
    idFromGU: Optional[StrictStr] = None
    amount: Optional[Number] = None
    fees: Optional[Number] = None
    recipientNumber: Optional[StrictStr] = None
    dateTime: Optional[Number] = None
    numTransaction: Optional[StrictStr] = None
    payment_url: Optional[StrictStr] = None
    detailMessage: Optional[StrictStr] = None


class BalanceResponse(BaseModel):
    """Balance answer. Only the types of the known keys are checked."""

    model_config = ConfigDict(extra="allow")

    status: Optional[StrictStr] = None
    message: Optional[StrictStr] = None
    balance: Optional[Number] = None
    detailMessage: Optional[StrictStr] = None


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

M = TypeVar("M", bound=BaseModel)


def resolve_operator(operator: Union[Operator, str], *, family: str) -> Operator:
    try:
        return Operator(operator)
    except ValueError:
        expected = ", ".join(op.value for op in Operator)
        raise RequestValidationError(
            f"Unknown {family} operator {operator!r}; expected one of {expected}",
            field_errors={"operator": f"must be one of {expected}"},
            operation=family,
        ) from None


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Flatten a pydantic error into ``{"dotted.path": "message"}``."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "__root__"
        errors.setdefault(path, err["msg"])
    return errors


def validate_request(model: Type[M], payload: Dict[str, Any], *, operation: Optional[str] = None) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = field_errors(exc)
        raise RequestValidationError(
            f"Invalid {operation or model.__name__} request: {', '.join(sorted(errors))}",
            field_errors=errors,
            operation=operation,
        ) from exc


def validate_response(model: Type[M], payload: Any, *, operation: Optional[str] = None) -> M:
    if not isinstance(payload, dict):
        raise ResponseValidationError(
            f"Unexpected {operation or model.__name__} response: expected a JSON object, got {type(payload).__name__}",
            field_errors={"__root__": "expected a JSON object"},
            payload=payload,
            operation=operation,
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = field_errors(exc)
        raise ResponseValidationError(
            f"Unexpected {operation or model.__name__} response: {', '.join(sorted(errors))}",
            field_errors=errors,
            payload=payload,
            operation=operation,
        ) from exc

"""
Async client for the Intouch (GuTouch) mobile-money gateway, Côte d'Ivoire.

Operators: Orange Money, Moov, MTN and Wave.
"""

from intouch.client import Intouch
from intouch.config import IntouchConfig
from intouch.contracts import (
    BalanceResponse,
    CashinResponse,
    CashoutResponse,
    Operator,
    TransactionStatus,
)
from intouch.errors import (
    ConfigurationError,
    IntouchError,
    RequestValidationError,
    ResponseValidationError,
    TransportError,
)

__all__ = [
    "Intouch",
    "IntouchConfig",
    "BalanceResponse",
    "CashinResponse",
    "CashoutResponse",
    "Operator",
    "TransactionStatus",
    "ConfigurationError",
    "IntouchError",
    "RequestValidationError",
    "ResponseValidationError",
    "TransportError",
]

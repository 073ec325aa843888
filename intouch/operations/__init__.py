"""
Operation facades.

Each facade owns one gateway operation and exposes one method per operator.
All facades of an ``Intouch`` instance share a single ``IntouchHttpClient``.
"""

from .balance import IntouchBalance
from .cashin import IntouchCashin
from .cashout import IntouchCashout

__all__ = ["IntouchBalance", "IntouchCashin", "IntouchCashout"]

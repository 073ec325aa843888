"""
Endpoint URL builders for the Intouch gateway.

Two hosts are involved:
- ``apidist.gutouch.net`` serves balance and cash-in
- ``api.gutouch.com`` serves the TouchPay transaction API used for cash-out
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DIST_API_URL = "https://apidist.gutouch.net/apidist/sec"
TOUCHPAY_API_URL = "https://api.gutouch.com/dist/api/touchpayapi/v1"

_SECRET_PARAMS = frozenset({"passwordAgent"})


def _credentials_query(login: str, password: str) -> str:
    return urlencode({"loginAgent": login, "passwordAgent": password})


def build_transaction_url(agent_code: str, login: str, password: str) -> str:
    return f"{TOUCHPAY_API_URL}/{agent_code}/transaction?{_credentials_query(login, password)}"


def build_cashin_url(
    agent_code: str,
    login: Optional[str] = None,
    password: Optional[str] = None,
    *,
    with_credentials: bool = False,
) -> str:
    """
    Return the cash-in endpoint.

    The default path form carries only the agent code; ``login``/``password`` are
    ignored. ``with_credentials=True`` selects the TouchPay form on the dist host,
    which puts both in the query string.
    """
    if not with_credentials:
        return f"{DIST_API_URL}/{agent_code}/cashin"
    if not login or not password:
        raise ValueError("Credential-bearing cash-in URL needs both login and password.")
    return f"{DIST_API_URL}/touchpayapi/{agent_code}/transaction?{_credentials_query(login, password)}"


def build_balance_url(agent_code: str) -> str:
    return f"{DIST_API_URL}/{agent_code}/get_balance"


def redact_url(url: str) -> str:
    """Mask secret query parameters so the URL can be logged."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [(k, "***" if k in _SECRET_PARAMS else v) for k, v in parse_qsl(parts.query, keep_blank_values=True)]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))

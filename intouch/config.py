"""
Credential and client configuration.

Sources, highest precedence first:
1. an explicit ``IntouchConfig`` object
2. individual keyword parameters
3. environment variables (a local ``.env`` file is loaded when present)
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from intouch.errors import ConfigurationError

logger = logging.getLogger(__name__)


# field -> (environment variable, human label); order is the check order
CREDENTIAL_ENV_VARS: Dict[str, tuple] = {
    "agent_code": ("INTOUCH_AGENT_CODE", "Agent code"),
    "partner_id": ("INTOUCH_PARTNER_ID", "Partner ID"),
    "partner_name": ("INTOUCH_PARTNER_NAME", "Partner name"),
    "login_api": ("INTOUCH_LOGIN_API", "Login API"),
    "password_api": ("INTOUCH_PASSWORD_API", "Password API"),
    "username": ("INTOUCH_CI_USERNAME", "Username"),
    "password": ("INTOUCH_CI_PASSWORD", "Password"),
}

OPTION_ENV_VARS: Dict[str, str] = {
    "auth_scheme": "INTOUCH_AUTH_SCHEME",
    "timeout_seconds": "INTOUCH_TIMEOUT_SECONDS",
    "cashin_url_with_credentials": "INTOUCH_CASHIN_URL_WITH_CREDENTIALS",
}


class IntouchConfig(BaseModel):
    """Everything an ``Intouch`` instance needs. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    agent_code: str = ""
    partner_id: str = ""
    partner_name: str = ""
    login_api: str = ""
    password_api: str = Field(default="", repr=False)
    username: str = ""
    password: str = Field(default="", repr=False)

    auth_scheme: Literal["basic", "digest"] = "basic"
    timeout_seconds: float = Field(default=20.0, gt=0)
    cashin_url_with_credentials: bool = False


def ensure_complete(config: IntouchConfig) -> IntouchConfig:
    """Raise ``ConfigurationError`` naming the first empty credential."""
    for field, (env_var, label) in CREDENTIAL_ENV_VARS.items():
        value = getattr(config, field)
        if not value or not str(value).strip():
            raise ConfigurationError(
                f"{label} is required. Please provide it via environment variable {env_var} "
                f"or the '{field}' parameter.",
                field=field,
                env_var=env_var,
            )
    return config


def resolve_config(
    config: Optional[IntouchConfig] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    **params: Any,
) -> IntouchConfig:
    """
    Build a complete ``IntouchConfig`` from the available sources.

    Args:
        config: explicit configuration; when given, other sources are ignored
        env: mapping to read instead of ``os.environ`` (skips ``.env`` loading)
        **params: individual fields, e.g. ``agent_code="..."``

    Raises:
        ConfigurationError: a credential is missing or an option is malformed
    """
    if config is not None:
        return ensure_complete(config)

    unknown = set(params) - set(IntouchConfig.model_fields)
    if unknown:
        raise TypeError(f"Unknown configuration parameter(s): {', '.join(sorted(unknown))}")

    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    values: Dict[str, Any] = {}
    for field, (env_var, _) in CREDENTIAL_ENV_VARS.items():
        values[field] = params.get(field) or env.get(env_var, "")

    for field, env_var in OPTION_ENV_VARS.items():
        if params.get(field) is not None:
            values[field] = params[field]
        elif env.get(env_var):
            values[field] = env[env_var]

    if isinstance(values.get("auth_scheme"), str):
        values["auth_scheme"] = values["auth_scheme"].strip().lower()
    if isinstance(values.get("cashin_url_with_credentials"), str):
        values["cashin_url_with_credentials"] = values["cashin_url_with_credentials"].strip().lower() in (
            "1", "true", "yes", "on",
        )

    try:
        resolved = IntouchConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid Intouch configuration: {exc}") from exc

    logger.debug("Resolved Intouch configuration for agent %s", resolved.agent_code or "<unset>")
    return ensure_complete(resolved)

"""
api_integration/utils/settings.py

WHAT THIS FILE IS FOR
---------------------
This module defines the *single source of truth* for runtime configuration
of the API integration client.

It is responsible for:
- Defining all supported configuration fields (via Pydantic BaseSettings)
- Loading default values from parameters/parameters.yaml
- Overriding defaults with environment variables (API_INTEGRATION_*)
- Reading the bearer token from the bare API_TOKEN variable
- Exposing a fully-validated Settings object, rebuilt from the environment
  on every call (only the YAML file read is cached)

LOAD & PRECEDENCE MODEL
-----------------------
Configuration is loaded in the following order (last wins):

1) YAML defaults from:
       parameters/parameters.yaml
2) Environment variables:
       API_INTEGRATION_*   (API_TOKEN for the token)

HOST SELECTION
--------------
`environment == "production"` selects `production_base_url`.
Any other value selects `sandbox_base_url`.

WHAT THIS FILE IS NOT FOR
-------------------------
This module is NOT responsible for:
- HTTP calls
- Building URLs or headers
- Response handling

It should only define *configuration structure and loading rules*.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import AliasChoices, AnyHttpUrl, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

PARAMETERS_PATH = Path(__file__).resolve().parents[2] / "parameters" / "parameters.yaml"

PRODUCTION_ENVIRONMENT = "production"


class Settings(BaseSettings):
    """
    Runtime settings for the API integration client.

    Load order / precedence:
        1) YAML defaults (parameters/parameters.yaml)
        2) Environment variables (API_INTEGRATION_*), overriding YAML
    """

    model_config = SettingsConfigDict(
        env_prefix="API_INTEGRATION_",
        extra="ignore",
    )

    # Service metadata
    service_name: str = "api_integration"
    environment: str = "development"

    # Base hosts (production vs. sandbox)
    production_base_url: Optional[AnyHttpUrl] = Field(
        default="https://api.production.com/v1", validate_default=True
    )
    sandbox_base_url: Optional[AnyHttpUrl] = Field(
        default="https://sandbox.api.com/v1", validate_default=True
    )

    # Bearer token. Read from the bare API_TOKEN variable, like the
    # deployment environments set it.
    api_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("API_TOKEN", "API_INTEGRATION_API_TOKEN", "api_token"),
        repr=False,
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION_ENVIRONMENT


def resolve_base_url(settings: Settings) -> str:
    """
    Return the base host for the given settings, without a trailing slash.

    Pure function of its input; callers evaluate it per request.
    """
    url = settings.production_base_url if settings.is_production else settings.sandbox_base_url
    return str(url).rstrip("/")


@lru_cache(maxsize=1)
def _load_yaml_parameters() -> Dict[str, Any]:
    """
    Load base configuration from parameters/parameters.yaml.

    Cached to:
    - Avoid repeated disk I/O
    - Guarantee consistent config during process lifetime
    """
    if not PARAMETERS_PATH.exists():
        logger.warning("parameters_yaml_missing", expected=str(PARAMETERS_PATH))
        return {}

    try:
        with PARAMETERS_PATH.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.error("parameters_yaml_load_error", path=str(PARAMETERS_PATH), error=str(exc))
        return {}

    if not isinstance(data, dict):
        logger.warning(
            "parameters_yaml_not_dict",
            path=str(PARAMETERS_PATH),
            type=type(data).__name__,
        )
        return {}
    logger.info("parameters_yaml_loaded", path=str(PARAMETERS_PATH))
    return data


def get_settings() -> Settings:
    """
    Construct and return the final validated Settings object.

    This function is:
    - NOT cached: environment variables are re-read on every call, so a
      changed API_INTEGRATION_ENVIRONMENT reaches the next request
    - Backed by the cached YAML defaults (one disk read per process)
    - The ONLY supported way to access process-wide settings
    """
    # 1) YAML defaults
    yaml_data = _load_yaml_parameters()

    # 2) env overrides (partial)
    try:
        env_settings = Settings()
        env_data = env_settings.model_dump(exclude_unset=True)
        logger.debug("settings_loaded_env_only_partial", fields=sorted(env_data.keys()))
    except ValidationError as exc:
        logger.warning("settings_env_validation_error", errors=exc.errors())
        env_data = {}

    # 3) merge
    merged: Dict[str, Any] = {**yaml_data, **env_data}

    # 4) enforce base URLs (YAML may blank them out)
    missing = [
        key
        for key in ("production_base_url", "sandbox_base_url")
        if key in merged and not merged[key]
    ]
    if missing:
        logger.error("settings_missing_required_urls", missing=missing, yaml_path=str(PARAMETERS_PATH))
        raise RuntimeError(
            f"Missing required settings: {', '.join(missing)}. "
            "Set them either in environment variables (API_INTEGRATION_*) "
            f"or in {PARAMETERS_PATH}."
        )

    # 5) final validation
    settings = Settings.model_validate(merged)

    logger.debug(
        "settings_loaded",
        environment=settings.environment,
        service_name=settings.service_name,
        production_base_url=str(settings.production_base_url),
        sandbox_base_url=str(settings.sandbox_base_url),
        token_configured=bool(settings.api_token),
    )

    return settings

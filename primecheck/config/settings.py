from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from primecheck.errors import ConfigurationError

_defaults = Path(__file__).with_name("defaults.yaml")

DEFAULT_TIMEOUT_SECONDS = 30

logger = logging.getLogger(__name__)


def load_environment(env_file: str | Path = ".env") -> bool:
    """Populate ``os.environ`` from a local key/value file.

    Variables already present in the process environment are left alone.
    A missing file is not an error: the credential may be exported directly.
    """
    path = Path(env_file)
    logger.info("Attempting to load %s", path)
    if not path.is_file():
        logger.info("Warning: %s not found; relying on the process environment", path)
        return False
    load_dotenv(path, override=False)
    logger.info("%s loaded successfully", path)
    return True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        yaml_file=_defaults,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Credential
    openai_api_key: str | None = None

    # LLM settings
    llm_model: str = "gpt-3.5-turbo"
    openai_base_url: str | None = None
    max_timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    # Tracing
    langsmith_tracing: bool = False
    langsmith_api_key: str | None = None
    langsmith_project: str = "primecheck"

    @field_validator("openai_api_key", "langsmith_api_key", "openai_base_url", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("max_timeout_seconds", mode="before")
    @classmethod
    def _lenient_timeout(cls, value):
        # Anything that is not a positive integer falls back to the default.
        try:
            seconds = int(str(value).strip())
        except (TypeError, ValueError):
            logger.info("Invalid timeout value %r, using default: %d seconds", value, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        if seconds <= 0:
            logger.info("Non-positive timeout %d, using default: %d seconds", seconds, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        return seconds

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # load YAML defaults, then let env-vars win
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))


def load_settings(**overrides) -> Settings:
    """Build a fresh Settings from the current environment."""
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from exc
    logger.info("Using model %s with a %d second timeout", settings.llm_model, settings.max_timeout_seconds)
    return settings


def require_api_key(settings: Settings) -> str:
    logger.info("Checking for OpenAI API key in environment")
    if not settings.openai_api_key:
        raise ConfigurationError(
            "OPENAI_API_KEY environment variable not set; "
            "set it in your .env file or in your environment"
        )
    logger.info("OpenAI API key found in environment")
    return settings.openai_api_key


def configure_tracing(settings: Settings) -> bool:
    """Export LangSmith variables so ``traceable`` calls are recorded."""
    if not settings.langsmith_tracing:
        logger.debug("LangSmith tracing disabled")
        return False
    if not settings.langsmith_api_key:
        logger.warning("LANGSMITH_TRACING is set but LANGSMITH_API_KEY is missing; tracing disabled")
        os.environ.pop("LANGSMITH_TRACING", None)
        return False

    os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    os.environ["LANGSMITH_PROJECT"] = settings.langsmith_project
    os.environ["LANGSMITH_TRACING"] = "true"
    logger.info("LangSmith tracing enabled for project: %s", settings.langsmith_project)
    return True


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "Settings",
    "configure_tracing",
    "load_environment",
    "load_settings",
    "require_api_key",
]

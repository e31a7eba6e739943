from primecheck.config.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    Settings,
    configure_tracing,
    load_environment,
    load_settings,
    require_api_key,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "Settings",
    "configure_tracing",
    "load_environment",
    "load_settings",
    "require_api_key",
]

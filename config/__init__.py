"""Configuration for the Secret Manager resolver."""

from .settings import (
    DEFAULT_PREFIX,
    PREFIX_ENV_VAR,
    ResolverSettings,
    clear_property,
    get_default_prefix,
    get_property,
    set_property,
)

__all__ = [
    "DEFAULT_PREFIX",
    "PREFIX_ENV_VAR",
    "ResolverSettings",
    "clear_property",
    "get_default_prefix",
    "get_property",
    "set_property",
]

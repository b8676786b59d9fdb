"""
Resolver configuration.

The reference prefix is read once when a secret source is initialized:
1. GCP_SECRET_MANAGER_PREFIX environment variable (ignored if blank)
2. GCP_SECRET_MANAGER_PREFIX process property
3. The compiled-in default, "gcpSecretManager:"

The resolution path never reads process state directly; it only sees the
ResolverSettings value produced here.
"""

import os
import threading
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


PREFIX_ENV_VAR = "GCP_SECRET_MANAGER_PREFIX"
DEFAULT_PREFIX = "gcpSecretManager:"


# ============================================
# PROCESS PROPERTIES
# ============================================

_properties: dict[str, str] = {}
_properties_lock = threading.Lock()


def set_property(name: str, value: str) -> None:
    """Set a process-level property (the fallback when the env var is unset)."""
    with _properties_lock:
        _properties[name] = value


def get_property(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get a process-level property, or default if it was never set."""
    with _properties_lock:
        return _properties.get(name, default)


def clear_property(name: str) -> None:
    """Remove a process-level property if present."""
    with _properties_lock:
        _properties.pop(name, None)


# ============================================
# SETTINGS
# ============================================


class ResolverSettings(BaseModel):
    """Immutable per-instance configuration of a secret source."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Prefix that marks a reference as addressed to Secret Manager",
    )

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverSettings":
        """
        Build settings from the environment and process properties.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ResolverSettings with the resolved prefix
        """
        environ = os.environ if environ is None else environ

        value = environ.get(PREFIX_ENV_VAR)
        if value is None or not value.strip():
            value = get_property(PREFIX_ENV_VAR, DEFAULT_PREFIX)

        return cls(prefix=value)


def get_default_prefix() -> str:
    return DEFAULT_PREFIX

"""
Dependency injection for FastAPI routes.

Provides the shared secret source.
"""

from functools import lru_cache

from services.secret_source import GcpSecretManagerSecretSource


@lru_cache()
def get_secret_source() -> GcpSecretManagerSecretSource:
    """
    Get the process-wide secret source (cached).

    The prefix is read from GCP_SECRET_MANAGER_PREFIX on first use;
    POST /secrets/reload starts a new resolution pass on the same instance.

    Returns:
        GcpSecretManagerSecretSource instance
    """
    return GcpSecretManagerSecretSource()

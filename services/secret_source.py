"""
Secret source backed by Google Cloud Secret Manager.

Resolves references of the form "<prefix><secret version path>", e.g.
"gcpSecretManager:projects/p/secrets/db-password/versions/latest".
References without the prefix are left for other resolvers.

Flow per reference:
1. Match the prefix (no match -> None, not an error)
2. Look the backend path up in the per-pass cache
3. On a miss, fetch from Secret Manager and verify the CRC32C checksum
4. Decode the payload as UTF-8, cache it, return it

Failures are never retried here and never cached.
"""

import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPIError

from config.settings import ResolverSettings, get_default_prefix
from schemas.secrets import AccessedSecret, SecretErrorKind
from services.cache import SecretCache
from services.errors import SecretClientInitError, SecretSourceError
from services.integrity import verify_payload
from services.reference import match_reference
from services.secret_client import SecretManagerClient


logger = logging.getLogger(__name__)


class GcpSecretManagerSecretSource:
    """
    Resolves prefixed references against Secret Manager, caching per pass.

    Usage:
        source = GcpSecretManagerSecretSource()
        password = source.reveal("gcpSecretManager:projects/p/secrets/db/versions/1")
    """

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        client: Optional[SecretManagerClient] = None,
    ):
        """
        Initialize the secret source.

        Args:
            settings: Resolver settings (defaults to ResolverSettings.load())
            client: Secret Manager adapter (defaults to one using real GCP clients)
        """
        self.client = client or SecretManagerClient()
        self.init(settings)

    def init(self, settings: Optional[ResolverSettings] = None) -> None:
        """
        Start a new resolution pass.

        Re-reads the settings (unless given) and discards the cache. In-flight
        resolutions finish against the state they started with.
        """
        if settings is None:
            settings = ResolverSettings.load()
        # Prefix and cache are replaced together
        self._state = (settings, SecretCache())

        logger.debug("GCP Secret Manager initialized with prefix: %s", settings.prefix)

    @property
    def settings(self) -> ResolverSettings:
        return self._state[0]

    @property
    def prefix(self) -> str:
        return self._state[0].prefix

    @staticmethod
    def get_default_prefix() -> str:
        return get_default_prefix()

    def cached_paths(self) -> list[str]:
        """Backend paths resolved so far in this pass."""
        return self._state[1].keys()

    def reveal(self, reference: str) -> Optional[str]:
        """
        Resolve a secret reference.

        Args:
            reference: Raw reference from configuration text

        Returns:
            The secret value, or None if the reference lacks the configured prefix

        Raises:
            InvalidSecretReference: If reference is None
            SecretSourceError: If the secret cannot be fetched or fails verification
        """
        settings, cache = self._state

        secret_path = match_reference(reference, settings.prefix)
        if secret_path is None:
            return None

        value, hit = cache.get_or_load(secret_path, self._fetch_secret)
        if hit:
            logger.debug("Read Secret from cache: %s", secret_path)
        return value

    resolve = reveal

    def _fetch_secret(self, secret_path: str) -> str:
        try:
            accessed = self.client.fetch(secret_path)
        except GoogleAPIError as e:
            logger.error("Failed to access secret: %s", secret_path, exc_info=True)
            raise SecretSourceError(
                f"Failed to access secret: {secret_path}: {e}",
                kind=SecretErrorKind.BACKEND_FAILURE,
                secret_path=secret_path,
                cause=e,
            ) from e
        except SecretClientInitError as e:
            cause = e.__cause__ or e
            logger.error("Failed to create Secret Manager client", exc_info=True)
            raise SecretSourceError(
                str(e),
                kind=SecretErrorKind.CLIENT_INIT_FAILURE,
                secret_path=secret_path,
                cause=cause,
            ) from cause
        except SecretSourceError:
            raise
        except Exception as e:
            raise self._unexpected(secret_path, e) from e

        return self._decode_verified(secret_path, accessed)

    def _decode_verified(self, secret_path: str, accessed: AccessedSecret) -> str:
        if not verify_payload(accessed.data, accessed.data_crc32c):
            raise SecretSourceError(
                f"Data corruption detected for secret: {accessed.name}",
                kind=SecretErrorKind.DATA_CORRUPTION,
                secret_path=secret_path,
            )

        try:
            value = accessed.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise self._unexpected(secret_path, e) from e

        logger.debug("Read Secret from Secret Manager: %s", secret_path)
        return value

    @staticmethod
    def _unexpected(secret_path: str, error: Exception) -> SecretSourceError:
        message = f"Unexpected error accessing secret: {secret_path}"
        logger.error(message, exc_info=error)
        return SecretSourceError(
            message,
            kind=SecretErrorKind.UNEXPECTED,
            secret_path=secret_path,
            cause=error,
        )

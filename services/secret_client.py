"""
Google Cloud Secret Manager client adapter.

Each fetch opens its own SecretManagerServiceClient and closes its transport
before returning, whether the call succeeded or raised.

Requires: google-cloud-secret-manager, GCP credentials configured
Secret path format: projects/PROJECT_ID/secrets/SECRET_NAME/versions/VERSION
"""

from typing import Callable

from google.cloud import secretmanager

from schemas.secrets import AccessedSecret
from services.errors import SecretClientInitError


ClientFactory = Callable[[], secretmanager.SecretManagerServiceClient]


def create_client() -> secretmanager.SecretManagerServiceClient:
    """
    Create a Secret Manager client using application default credentials.

    Raises:
        google.auth.exceptions.DefaultCredentialsError: If no credentials are available
    """
    return secretmanager.SecretManagerServiceClient()


class SecretManagerClient:
    """Fetches secret versions by resource path."""

    def __init__(self, client_factory: ClientFactory = create_client):
        """
        Initialize the adapter.

        Args:
            client_factory: Callable returning a new SecretManagerServiceClient
                (overridable so tests can supply a fake)
        """
        self.client_factory = client_factory

    def fetch(self, path: str) -> AccessedSecret:
        """
        Access one secret version.

        Args:
            path: Full secret version resource name

        Returns:
            AccessedSecret with payload bytes, advertised checksum and canonical name

        Raises:
            SecretClientInitError: If the client cannot be created (e.g. no credentials)
            google.api_core.exceptions.GoogleAPIError: If the service rejects the call
        """
        try:
            client = self.client_factory()
        except Exception as e:
            raise SecretClientInitError(f"Failed to create Secret Manager client: {e}") from e

        with client:
            response = client.access_secret_version(request={"name": path})

        payload = response.payload
        data_crc32c = payload.data_crc32c if "data_crc32c" in payload else None

        return AccessedSecret(
            name=response.name,
            data=payload.data,
            data_crc32c=data_crc32c,
        )

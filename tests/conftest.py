import pytest
from unittest.mock import MagicMock

import google_crc32c
from google.cloud import secretmanager

from config.settings import PREFIX_ENV_VAR, ResolverSettings, clear_property
from services.secret_client import SecretManagerClient
from services.secret_source import GcpSecretManagerSecretSource


def build_response(name: str, value: str, data_crc32c=None):
    """Build an AccessSecretVersionResponse, with a correct checksum unless one is given."""
    data = value.encode("utf-8")
    if data_crc32c is None:
        data_crc32c = google_crc32c.value(data)
    return secretmanager.AccessSecretVersionResponse(
        name=name,
        payload=secretmanager.SecretPayload(data=data, data_crc32c=data_crc32c),
    )


@pytest.fixture(autouse=True)
def clean_prefix_config(monkeypatch):
    monkeypatch.delenv(PREFIX_ENV_VAR, raising=False)
    clear_property(PREFIX_ENV_VAR)
    yield
    clear_property(PREFIX_ENV_VAR)


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    return client


@pytest.fixture
def client_factory(mock_client):
    return MagicMock(return_value=mock_client)


@pytest.fixture
def secret_source(client_factory):
    return GcpSecretManagerSecretSource(
        settings=ResolverSettings(),
        client=SecretManagerClient(client_factory=client_factory),
    )

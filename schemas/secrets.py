"""
Pydantic schemas for secret access results and the resolver HTTP surface.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# ============================================
# ENUMS
# ============================================


class SecretErrorKind(str, Enum):
    CONTRACT_VIOLATION = "contract_violation"
    CLIENT_INIT_FAILURE = "client_init_failure"
    BACKEND_FAILURE = "backend_failure"
    DATA_CORRUPTION = "data_corruption"
    UNEXPECTED = "unexpected"


# ============================================
# SECRET MANAGER RESULTS
# ============================================


class AccessedSecret(BaseModel):
    """One secret version as returned by Secret Manager."""

    name: str = Field(description="Canonical resource name reported by the service")
    data: bytes = Field(description="Raw payload bytes")
    data_crc32c: Optional[int] = Field(
        description="CRC32C checksum advertised for the payload", default=None
    )


# ============================================
# REQUEST MODELS
# ============================================


class ResolveRequest(BaseModel):
    """Request to resolve a batch of secret references."""

    references: list[str] = Field(description="Raw references, e.g. 'gcpSecretManager:projects/...'")


# ============================================
# RESPONSE MODELS
# ============================================


class ResolvedReference(BaseModel):
    """Resolution result for a single reference."""

    reference: str
    found: bool
    value: Optional[str] = None


class ResolveResponse(BaseModel):
    """Batch resolution response."""

    results: list[ResolvedReference]


class ResolverStatusResponse(BaseModel):
    """Current prefix and the backend paths cached in this pass."""

    prefix: str
    cached_paths: list[str]


class ErrorResponse(BaseModel):
    """Error body returned when a reference cannot be resolved."""

    kind: SecretErrorKind
    detail: str

"""
Errors raised while resolving secret references.

Every unrecoverable condition surfaces as a SecretSourceError, an IOError
subclass tagged with a SecretErrorKind so callers can tell a backend failure
from data corruption without matching on messages. A missing reference is a
caller bug and raises InvalidSecretReference instead.
"""

from typing import Optional

from schemas.secrets import SecretErrorKind


class SecretSourceError(IOError):
    """I/O-class failure resolving a secret."""

    def __init__(
        self,
        message: str,
        kind: SecretErrorKind,
        secret_path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.secret_path = secret_path
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class InvalidSecretReference(TypeError):
    """Raised when a reference is None or not a string."""

    kind = SecretErrorKind.CONTRACT_VIOLATION


class SecretClientInitError(Exception):
    """Raised by the client adapter when a Secret Manager client cannot be created."""

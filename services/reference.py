"""
Secret reference matching.

A reference is "<prefix><backend path>". The backend path is opaque here;
Secret Manager rejects malformed paths itself.
"""

from typing import Optional

from services.errors import InvalidSecretReference


def has_prefix(reference: str, prefix: Optional[str]) -> bool:
    """
    Check whether a reference is addressed to this resolver.

    An empty or missing prefix never matches.

    Raises:
        InvalidSecretReference: If reference is None or not a string
    """
    if not isinstance(reference, str):
        raise InvalidSecretReference(
            f"Secret reference must be a string, got {type(reference).__name__}"
        )
    return bool(prefix) and reference.startswith(prefix)


def match_reference(reference: str, prefix: Optional[str]) -> Optional[str]:
    """
    Extract the backend path from a reference.

    Args:
        reference: Raw reference from configuration text
        prefix: Configured prefix

    Returns:
        The backend path (possibly empty), or None if the reference
        does not carry the prefix
    """
    if not has_prefix(reference, prefix):
        return None
    return reference[len(prefix):]

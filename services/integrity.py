"""
CRC32C payload verification for Secret Manager responses.
"""

from typing import Optional

import google_crc32c


def compute_crc32c(data: bytes) -> int:
    """Compute the CRC32C (Castagnoli) checksum of data."""
    checksum = google_crc32c.Checksum()
    checksum.update(data)
    return int.from_bytes(checksum.digest(), "big")


def verify_payload(data: bytes, advertised_crc32c: Optional[int]) -> bool:
    """
    Check payload bytes against the checksum advertised by the service.

    Returns:
        True only if a checksum was advertised and it matches the payload
    """
    if advertised_crc32c is None:
        return False
    return compute_crc32c(data) == advertised_crc32c

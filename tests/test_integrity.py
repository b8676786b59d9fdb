from services.integrity import compute_crc32c, verify_payload


def test_crc32c_known_vectors():
    # Castagnoli check value, not the zlib CRC32 one (0xCBF43926)
    assert compute_crc32c(b"123456789") == 0xE3069283
    assert compute_crc32c(b"") == 0


def test_verify_accepts_matching_checksum():
    data = "secret-value".encode("utf-8")
    assert verify_payload(data, compute_crc32c(data)) is True


def test_verify_rejects_wrong_checksum():
    assert verify_payload(b"value", 12345) is False


def test_verify_rejects_missing_checksum():
    assert verify_payload(b"value", None) is False

import zlib


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def hash_bytes(data: bytes) -> int:
    """CRC-32 of data, as an unsigned 32-bit integer."""
    return zlib.crc32(data) & 0xFFFFFFFF


def fnv1a_32(data: bytes) -> int:
    hash = FNV_OFFSET_BASIS
    for byte in data:
        hash ^= byte
        hash = (hash * FNV_PRIME) & 0xFFFFFFFF
    return hash

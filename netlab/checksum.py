"""Internet-style one's-complement checksums over bytes and over 4-bit words."""

from typing import Union

WORD_BITS = 4


def _fold(total: int) -> int:
    while total >> 8:
        total = (total & 0xFF) + (total >> 8)
    return total


def _as_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    return data.encode() if isinstance(data, str) else bytes(data)


def byte_checksum(data: Union[bytes, bytearray, str]) -> int:
    """Return the 8-bit one's-complement checksum of ``data``."""
    return 0xFF - _fold(sum(_as_bytes(data)))


def verify_byte_checksum(data: Union[bytes, bytearray, str], checksum: int) -> bool:
    """Return True when ``data`` plus ``checksum`` folds to 0xFF."""
    if not 0 <= checksum <= 0xFF:
        raise ValueError("checksum must fit in one byte")
    return _fold(sum(_as_bytes(data)) + checksum) == 0xFF


def _require_word(name: str, value: str) -> None:
    if len(value) != WORD_BITS or set(value) - {"0", "1"}:
        raise ValueError(f"{name} must be a {WORD_BITS}-bit binary string")


def binary_sum(a: str, b: str) -> str:
    """Add two 4-bit words, feeding any carry back into the lowest bit."""
    _require_word("a", a)
    _require_word("b", b)
    bits = [0] * WORD_BITS
    carry = 0
    for i in reversed(range(WORD_BITS)):
        total = int(a[i]) + int(b[i]) + carry
        bits[i], carry = total % 2, total // 2
    while carry:
        total = bits[-1] + carry
        bits[-1], carry = total % 2, total // 2
    return "".join(map(str, bits))


def ones_complement(bits: str) -> str:
    """Invert every bit of a binary string."""
    if set(bits) - {"0", "1"}:
        raise ValueError("bits must be a binary string")
    return bits.translate(str.maketrans("01", "10"))


def nibble_checksum(a: str, b: str) -> str:
    """Return the checksum word sent after data words ``a`` and ``b``."""
    return ones_complement(binary_sum(a, b))


def verify_nibble_checksum(a: str, b: str, checksum: str) -> bool:
    """Return True when the words and checksum sum to all ones."""
    return binary_sum(binary_sum(a, b), checksum) == "1" * WORD_BITS
"""Line codes for binary data: NRZ-L, NRZ-I, Manchester and differential Manchester."""

from enum import Enum
from typing import List


class Level(Enum):
    """Signal level on the line."""

    HIGH = "HIGH"
    LOW = "LOW"


def _require_bits(bits: str) -> None:
    if not isinstance(bits, str) or set(bits) - {"0", "1"}:
        raise ValueError("bits must be a string of '0' and '1' characters")


def nrz_l(bits: str) -> List[Level]:
    """Non-return-to-zero level: '1' is HIGH, '0' is LOW."""
    _require_bits(bits)
    return [Level.HIGH if bit == "1" else Level.LOW for bit in bits]


def nrz_i(bits: str) -> List[Level]:
    """Non-return-to-zero inverted: the level toggles on every '1', starting LOW."""
    _require_bits(bits)
    levels: List[Level] = []
    high = False
    for bit in bits:
        if bit == "1":
            high = not high
        levels.append(Level.HIGH if high else Level.LOW)
    return levels


def manchester(bits: str) -> List[str]:
    """Manchester code: '0' is sent as high-to-low ("10"), '1' as low-to-high ("01")."""
    _require_bits(bits)
    return ["10" if bit == "0" else "01" for bit in bits]


def differential_manchester(bits: str) -> List[str]:
    """Differential Manchester code, starting from a high previous level.

    A '0' repeats the previous symbol; a '1' inverts it.
    """
    _require_bits(bits)
    symbols: List[str] = []
    previous = 1
    for bit in bits:
        if bit == "0":
            previous ^= 1
        symbols.append(f"{previous}{previous ^ 1}")
        previous ^= 1
    return symbols
"""Even-parity Hamming codes: the fixed (7,4) code and the general form.

Code words are lists of bits where index ``i`` holds bit position ``i + 1``.
"""

from typing import List, NamedTuple, Sequence, Tuple


class CheckResult(NamedTuple):
    """Outcome of checking a code word: error position (0 if none) and corrected bits."""

    position: int
    corrected: Tuple[int, ...]


def _require_bits(bits: Sequence[int]) -> List[int]:
    values = list(bits)
    if any(bit not in (0, 1) for bit in values):
        raise ValueError("bits must be 0 or 1")
    return values


def encode74(data: Sequence[int]) -> List[int]:
    """Encode four data bits into a seven-bit Hamming code word."""
    d = _require_bits(data)
    if len(d) != 4:
        raise ValueError("encode74 needs exactly 4 data bits")
    code = [0, 0, d[0], 0, d[1], d[2], d[3]]
    code[0] = code[2] ^ code[4] ^ code[6]
    code[1] = code[2] ^ code[5] ^ code[6]
    code[3] = code[4] ^ code[5] ^ code[6]
    return code


def check74(received: Sequence[int]) -> CheckResult:
    """Locate and correct a single-bit error in a seven-bit code word."""
    r = _require_bits(received)
    if len(r) != 7:
        raise ValueError("check74 needs exactly 7 bits")
    p1 = r[0] ^ r[2] ^ r[4] ^ r[6]
    p2 = r[1] ^ r[2] ^ r[5] ^ r[6]
    p4 = r[3] ^ r[4] ^ r[5] ^ r[6]
    position = p1 + 2 * p2 + 4 * p4
    if position:
        r[position - 1] ^= 1
    return CheckResult(position, tuple(r))


def parity_bit_count(data_bits: int) -> int:
    """Return the number of parity bits needed for ``data_bits`` data bits."""
    if data_bits < 0:
        raise ValueError("data_bits must not be negative")
    r = 0
    while 2**r < data_bits + r + 1:
        r += 1
    return r


def _is_power_of_two(x: int) -> bool:
    return x > 0 and x & (x - 1) == 0


def _syndrome(code: Sequence[int]) -> int:
    total = len(code)
    error = 0
    for i in range(total.bit_length()):
        pos = 1 << i
        parity = 0
        for position, bit in enumerate(code, start=1):
            if position & pos:
                parity ^= bit
        if parity:
            error += pos
    return error


def encode(data: Sequence[int]) -> List[int]:
    """Encode any number of data bits; data fill non-parity positions in order."""
    bits = iter(_require_bits(data))
    total = len(data) + parity_bit_count(len(data))
    code = [0 if _is_power_of_two(position) else next(bits) for position in range(1, total + 1)]
    for i in range(total.bit_length()):
        pos = 1 << i
        parity = 0
        for position, bit in enumerate(code, start=1):
            if position & pos:
                parity ^= bit
        code[pos - 1] = parity
    return code


def detect_and_correct(code: Sequence[int]) -> CheckResult:
    """Locate and correct a single-bit error in a general Hamming code word."""
    bits = _require_bits(code)
    position = _syndrome(bits)
    if position > len(bits):
        raise ValueError(f"error syndrome {position} lies outside the code word")
    if position:
        bits[position - 1] ^= 1
    return CheckResult(position, tuple(bits))
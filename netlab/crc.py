"""Cyclic redundancy check by modulo-2 long division over bit strings."""

CRC_12 = "1100000001111"
CRC_16 = "11000000000000101"


def _require_bits(name: str, value: str) -> None:
    if not isinstance(value, str) or set(value) - {"0", "1"}:
        raise ValueError(f"{name} must be a string of '0' and '1' characters")


def _xor_tail(a: str, b: str) -> str:
    """XOR two equal-length bit strings, dropping the leading bit."""
    return "".join("0" if x == y else "1" for x, y in zip(a[1:], b[1:]))


def _step(window: str, divisor: str) -> str:
    subtrahend = divisor if window.startswith("1") else "0" * len(window)
    return _xor_tail(subtrahend, window)


def mod2div(dividend: str, divisor: str) -> str:
    """Return the remainder of modulo-2 division of ``dividend`` by ``divisor``."""
    _require_bits("dividend", dividend)
    _require_bits("divisor", divisor)
    if not divisor:
        raise ValueError("divisor must not be empty")
    pick = len(divisor)
    window = dividend[:pick]
    for bit in dividend[pick:]:
        window = _step(window, divisor) + bit
    return _step(window, divisor)


def encode(data: str, key: str) -> str:
    """Return ``data`` followed by its CRC remainder for generator ``key``."""
    _require_bits("key", key)
    if not key:
        raise ValueError("key must not be empty")
    appended = data + "0" * (len(key) - 1)
    return data + mod2div(appended, key)


def has_error(received: str, key: str) -> bool:
    """Return True when ``received`` leaves a non-zero remainder for ``key``."""
    return "1" in mod2div(received, key)
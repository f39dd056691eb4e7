"""Small computing services: a calculator, quadratic roots, array search and sort.

Each service has a pure function and a pair of wire helpers. ``handle_*`` serves
one request on a connected stream socket. ``request_*`` sends one request and
returns the reply. Integers travel as 32-bit little-endian values, quadratic
coefficients as 32-bit floats, and the calculator operator as one byte.
"""

import math
import socket
import struct
from typing import List, Optional, Sequence, Tuple

MAX_VALUES = 100
"""Largest array the search and sort services accept."""

IMAGINARY = "Imaginary roots"
_REPLY_LIMIT = 100

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def calculate(a: int, b: int, op: str) -> int:
    """Apply ``op`` (+, -, *, /) to two 32-bit integers.

    Division truncates toward zero, division by zero yields 0, and an unknown
    operator yields 0. Results wrap to 32 bits.
    """
    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    elif op == "/":
        if b == 0:
            return 0
        quotient = abs(a) // abs(b)
        result = -quotient if (a < 0) != (b < 0) else quotient
    else:
        return 0
    return _wrap32(result)


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def quadratic_roots(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Return the two real roots of ax² + bx + c, or None when they are imaginary.

    With ``a`` zero the division follows floating-point rules (infinity or NaN).
    """
    d = b * b - 4 * a * c
    if d < 0:
        return None
    root = math.sqrt(d)
    return _ieee_div(-b + root, 2 * a), _ieee_div(-b - root, 2 * a)


def _describe(roots: Optional[Tuple[float, float]]) -> str:
    if roots is None:
        return IMAGINARY
    first, second = roots
    return f"Roots: {first:.2f} and {second:.2f}"


def search(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of the first occurrence of ``key``, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)


def bubble_sort(values: Sequence[int]) -> List[int]:
    """Return a sorted copy of ``values``, stopping early once a pass makes no swap."""
    items = list(values)
    for done in range(len(items)):
        swapped = False
        for j in range(len(items) - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _recv_exact(conn: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = conn.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError("connection closed before the message was complete")
        chunks.extend(chunk)
    return bytes(chunks)


def _pack_int(value: int) -> bytes:
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"{value} does not fit in a 32-bit integer")
    return _INT.pack(value)


def _read_int(conn: socket.socket) -> int:
    return _INT.unpack(_recv_exact(conn, _INT.size))[0]


def _read_ints(conn: socket.socket, count: int) -> List[int]:
    data = _recv_exact(conn, _INT.size * count)
    return [value for (value,) in _INT.iter_unpack(data)]


def _check_count(count: int) -> None:
    if not 0 <= count <= MAX_VALUES:
        raise ValueError(f"array length must be between 0 and {MAX_VALUES}, got {count}")


def _pack_array(values: Sequence[int]) -> bytes:
    items = list(values)
    _check_count(len(items))
    return _pack_int(len(items)) + b"".join(map(_pack_int, items))


def _read_array(conn: socket.socket) -> List[int]:
    count = _read_int(conn)
    _check_count(count)
    return _read_ints(conn, count)


def handle_calculator(conn: socket.socket) -> int:
    """Serve one calculation: read a, b and the operator, reply with the result."""
    a, b = _read_ints(conn, 2)
    op = _recv_exact(conn, 1).decode("latin-1")
    result = calculate(a, b, op)
    conn.sendall(_INT.pack(result))
    return result


def request_calculation(conn: socket.socket, a: int, b: int, op: str) -> int:
    """Ask the calculator service for ``a op b``."""
    if len(op) != 1:
        raise ValueError("op must be a single character")
    conn.sendall(_pack_int(a) + _pack_int(b) + op.encode("latin-1"))
    return _read_int(conn)


def handle_quadratic(conn: socket.socket) -> str:
    """Serve one quadratic request and reply with a text description of the roots.

    The reply has no length prefix, so the sending side is shut down after it.
    """
    a, b, c = (_FLOAT.unpack(_recv_exact(conn, _FLOAT.size))[0] for _ in range(3))
    text = _describe(quadratic_roots(a, b, c))
    payload = text.encode()
    if text == IMAGINARY:
        payload += b"\0"
    conn.sendall(payload[:_REPLY_LIMIT])
    conn.shutdown(socket.SHUT_WR)
    return text


def request_quadratic(conn: socket.socket, a: float, b: float, c: float) -> str:
    """Send coefficients and return the server's description of the roots."""
    conn.sendall(b"".join(_FLOAT.pack(value) for value in (a, b, c)))
    reply = bytearray()
    while len(reply) < _REPLY_LIMIT:
        chunk = conn.recv(_REPLY_LIMIT - len(reply))
        if not chunk:
            break
        reply.extend(chunk)
    return bytes(reply).split(b"\0", 1)[0].decode()


def handle_search(conn: socket.socket) -> Optional[int]:
    """Serve one search: read an array and a key, reply with found flag and index."""
    values = _read_array(conn)
    key = _read_int(conn)
    index = search(values, key)
    found = index is not None
    conn.sendall(_INT.pack(int(found)) + _INT.pack(index if found else -1))
    return index


def request_search(conn: socket.socket, values: Sequence[int], key: int) -> Optional[int]:
    """Ask the search service for ``key`` in ``values``; return its index or None."""
    conn.sendall(_pack_array(values) + _pack_int(key))
    found, index = _read_ints(conn, 2)
    return index if found and index != -1 else None


def handle_sort(conn: socket.socket) -> List[int]:
    """Serve one sort: read an array and reply with it sorted."""
    ordered = bubble_sort(_read_array(conn))
    conn.sendall(b"".join(_INT.pack(value) for value in ordered))
    return ordered


def request_sort(conn: socket.socket, values: Sequence[int]) -> List[int]:
    """Ask the sort service to sort ``values``."""
    items = list(values)
    conn.sendall(_pack_array(items))
    return _read_ints(conn, len(items))
import math
import socket
import struct
import threading

import pytest

from netlab import compute


class _Server:
    def __init__(self, handler):
        self.client, self._server = socket.socketpair()
        self.client.settimeout(5)
        self._server.settimeout(5)
        self.results = []
        self.errors = []
        self._thread = threading.Thread(target=self._run, args=(handler,))
        self._thread.start()

    def _run(self, handler):
        try:
            self.results.append(handler(self._server))
        except Exception as exc:  # recorded for the test to inspect
            self.errors.append(exc)
        finally:
            self._server.close()

    def finish(self):
        self._thread.join(5)
        self.client.close()


@pytest.fixture
def serve():
    servers = []

    def start(handler):
        server = _Server(handler)
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.finish()


@pytest.fixture
def pair():
    client, server = socket.socketpair()
    client.settimeout(5)
    server.settimeout(5)
    yield client, server
    client.close()
    server.close()


@pytest.mark.parametrize(
    "a,b,op,expected",
    [(12, 5, "+", 17), (12, 5, "-", 7), (12, 5, "*", 60), (12, 5, "/", 2)],
)
def test_calculate_basic(a, b, op, expected):
    assert compute.calculate(a, b, op) == expected


def test_calculate_truncates_toward_zero():
    assert compute.calculate(-7, 2, "/") == -3


def test_calculate_division_by_zero_gives_zero():
    assert compute.calculate(42, 0, "/") == 0


def test_calculate_unknown_operator_gives_zero():
    assert compute.calculate(6, 3, "%") == 0


def test_calculate_wraps_to_32_bits():
    assert compute.calculate(2**31 - 1, 1, "+") == -(2**31)


def test_quadratic_imaginary():
    assert compute.quadratic_roots(1, 0, 1) is None


def test_quadratic_roots_satisfy_equation():
    roots = compute.quadratic_roots(2.0, -3.0, -5.0)
    for x in roots:
        assert 2.0 * x * x - 3.0 * x - 5.0 == pytest.approx(0.0, abs=1e-9)
    assert roots[0] >= roots[1]


def test_quadratic_zero_a_follows_float_rules():
    roots = compute.quadratic_roots(0.0, 2.0, 1.0)
    assert len(roots) == 2
    assert str(roots[0]) == "nan"
    assert roots[1] == -math.inf


def test_search_first_occurrence():
    values = [4, 9, 2, 9]
    assert compute.search(values, 9) == values.index(9)
    assert compute.search(values, 7) is None


@pytest.mark.parametrize("values", [[], [1], [5, 3, 8, 1, 9, 2], [3, 3, 1, -4], [1, 2, 3]])
def test_bubble_sort_matches_sorted(values):
    original = list(values)
    assert compute.bubble_sort(values) == sorted(values)
    assert values == original


def test_calculator_over_socket(serve):
    server = serve(compute.handle_calculator)
    assert compute.request_calculation(server.client, 20, 4, "/") == compute.calculate(20, 4, "/")
    server.finish()
    assert server.results == [compute.calculate(20, 4, "/")]


def test_calculator_wire_format(serve):
    server = serve(compute.handle_calculator)
    server.client.sendall(struct.pack("<ii", 3, 4) + b"*")
    reply = server.client.recv(4)
    assert struct.unpack("<i", reply)[0] == compute.calculate(3, 4, "*")


def test_request_calculation_rejects_long_operator():
    a, b = socket.socketpair()
    with a, b:
        with pytest.raises(ValueError):
            compute.request_calculation(a, 1, 2, "++")


def test_request_calculation_rejects_out_of_range():
    a, b = socket.socketpair()
    with a, b:
        with pytest.raises(ValueError):
            compute.request_calculation(a, 2**31, 1, "+")


def test_quadratic_over_socket(serve):
    server = serve(compute.handle_quadratic)
    assert compute.request_quadratic(server.client, 1.0, -5.0, 6.0) == "Roots: 3.00 and 2.00"


def test_quadratic_imaginary_over_socket(serve):
    server = serve(compute.handle_quadratic)
    assert compute.request_quadratic(server.client, 1.0, 1.0, 1.0) == compute.IMAGINARY


def test_search_over_socket(serve):
    values = [10, 20, 30, 20]
    server = serve(compute.handle_search)
    assert compute.request_search(server.client, values, 20) == values.index(20)


def test_search_missing_over_socket(serve):
    server = serve(compute.handle_search)
    assert compute.request_search(server.client, [1, 2, 3], 99) is None
    server.finish()
    assert server.results == [None]


def test_sort_over_socket(serve):
    values = [7, -1, 3, 3, 0]
    server = serve(compute.handle_sort)
    assert compute.request_sort(server.client, values) == sorted(values)


def test_request_sort_rejects_too_many_values():
    a, b = socket.socketpair()
    with a, b:
        with pytest.raises(ValueError):
            compute.request_sort(a, range(compute.MAX_VALUES + 1))


def test_handle_sort_rejects_bad_length(pair):
    client, server = pair
    client.sendall(struct.pack("<i", -1))
    with pytest.raises(ValueError):
        compute.handle_sort(server)


def test_handler_reports_truncated_request(pair):
    client, server = pair
    client.sendall(struct.pack("<i", 1))
    client.shutdown(socket.SHUT_WR)
    with pytest.raises(ConnectionError):
        compute.handle_calculator(server)
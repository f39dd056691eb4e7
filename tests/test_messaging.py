import io
import socket
import threading

import pytest

from netlab import messaging


class _Runner:
    def __init__(self, func, *args):
        self.result = None
        self.error = None
        self._thread = threading.Thread(target=self._run, args=(func, args), daemon=True)
        self._thread.start()

    def _run(self, func, args):
        try:
            self.result = func(*args)
        except BaseException as exc:  # noqa: BLE001
            self.error = exc

    def join(self):
        self._thread.join(timeout=5)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    yield a, b
    a.close()
    b.close()


def test_echo_round_trip(pair):
    client, server = pair
    runner = _Runner(messaging.handle_echo, server)
    assert messaging.echo(client, "ping") == "ping"
    assert messaging.echo(client, "second line\n") == "second line\n"
    client.shutdown(socket.SHUT_WR)
    assert runner.join() == ["ping", "second line\n"]


def test_echo_rejects_empty_message(pair):
    client, _ = pair
    with pytest.raises(ValueError):
        messaging.echo(client, "")


def test_hello_exchange(pair):
    client, server = pair
    runner = _Runner(messaging.handle_hello, server)
    assert messaging.hello(client) == "Hello from server!"
    assert runner.join() == "Hello from client!"


def test_udp_hello_exchange():
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    client = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        for sock in (server, client):
            sock.settimeout(5)
            sock.bind(("127.0.0.1", 0))
        runner = _Runner(messaging.handle_udp_hello, server)
        assert messaging.udp_hello(client, server.getsockname()) == messaging.SERVER_GREETING
        message, address = runner.join()
        assert message == messaging.CLIENT_GREETING
        assert address == client.getsockname()
    finally:
        server.close()
        client.close()


def test_relay_incoming_writes_labelled_messages(pair):
    a, b = pair
    output = io.StringIO()
    a.sendall(b"hi\n")
    a.shutdown(socket.SHUT_WR)
    assert messaging.relay_incoming(b, output, "Client") == 1
    assert output.getvalue() == "\nClient: hi\n\n"


def test_chat_sends_lines_and_relays_peer(pair):
    a, b = pair
    output = io.StringIO()
    b.sendall(b"hi\n")
    b.shutdown(socket.SHUT_WR)
    sent = messaging.chat(a, ["hello\n", "", "bye\n"], output, "Server")
    assert sent == 2
    assert output.getvalue() == "\nServer: hi\n\n"
    received = bytearray()
    while True:
        chunk = b.recv(1024)
        if not chunk:
            break
        received.extend(chunk)
    assert received == b"hello\nbye\n"


def test_upload_round_trip(pair, tmp_path):
    client, server = pair
    source_dir = tmp_path / "src"
    target_dir = tmp_path / "dst"
    source_dir.mkdir()
    target_dir.mkdir()
    content = b"line one\nline two\n" * 200
    source = source_dir / "notes.txt"
    source.write_bytes(content)
    runner = _Runner(messaging.handle_upload, server, target_dir)
    assert messaging.upload(client, source) == len(content)
    written = runner.join()
    assert written == target_dir / "notes.txt"
    assert written.read_bytes() == content


def test_upload_missing_file_raises(pair, tmp_path):
    client, _ = pair
    with pytest.raises(FileNotFoundError):
        messaging.upload(client, tmp_path / "absent.txt")


def test_handle_upload_rejects_directory_in_name(pair, tmp_path):
    client, server = pair
    client.sendall(b"../escape.txt".ljust(messaging.FILENAME_FIELD, b"\0"))
    client.shutdown(socket.SHUT_WR)
    with pytest.raises(ValueError):
        messaging.handle_upload(server, tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_download_round_trip(pair, tmp_path):
    client, server = pair
    content = bytes(range(256)) * 10
    (tmp_path / "data.bin").write_bytes(content)
    runner = _Runner(messaging.handle_download, server, tmp_path)
    assert messaging.download(client, "data.bin") == content
    assert runner.join() == tmp_path / "data.bin"


def test_download_missing_file(pair, tmp_path):
    client, server = pair
    runner = _Runner(messaging.handle_download, server, tmp_path)
    assert messaging.download(client, "missing.txt") == b"File not found"
    assert runner.join() is None


def test_filename_field_is_nul_padded(pair):
    client, server = pair
    server.shutdown(socket.SHUT_WR)
    assert messaging.download(client, "a.txt") == b""
    field = b""
    while len(field) < messaging.FILENAME_FIELD:
        chunk = server.recv(messaging.FILENAME_FIELD - len(field))
        if not chunk:
            break
        field += chunk
    assert field == b"a.txt" + b"\0" * (messaging.FILENAME_FIELD - 5)


def test_download_rejects_overlong_name(pair):
    client, _ = pair
    with pytest.raises(ValueError):
        messaging.download(client, "x" * messaging.FILENAME_FIELD)
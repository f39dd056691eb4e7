"""Plain message exchanges over sockets: echo, hello, chat and file transfer.

Each exchange has a serving side (``handle_*`` or ``relay_incoming``) and a
requesting side. Both work on sockets that are already connected or bound.
File names travel in a fixed 1024-byte field padded with NUL bytes. File
contents follow the name and end when the sender closes its side.
"""

import os
import socket
import threading
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple, Union

ECHO_PORT = 7075
HELLO_PORT = 8080
CHAT_PORT = 8090
UPLOAD_PORT = 8081
DOWNLOAD_PORT = 8082

BUFFER_SIZE = 1024
CHAT_BUFFER_SIZE = 100
FILENAME_FIELD = 1024

CLIENT_GREETING = "Hello from client!"
SERVER_GREETING = "Hello from server!"
NOT_FOUND = "File not found"

Address = Union[Tuple[str, int], str]


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _recv_exact(conn: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = conn.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError("connection closed before the message was complete")
        chunks.extend(chunk)
    return bytes(chunks)


def _recv_all(conn: socket.socket) -> bytes:
    chunks = bytearray()
    while True:
        chunk = conn.recv(BUFFER_SIZE)
        if not chunk:
            return bytes(chunks)
        chunks.extend(chunk)


def _pack_filename(name: str) -> bytes:
    encoded = name.encode("utf-8")
    if not encoded or b"\0" in encoded or len(encoded) >= FILENAME_FIELD:
        raise ValueError(f"file name must be 1 to {FILENAME_FIELD - 1} bytes without NUL: {name!r}")
    return encoded.ljust(FILENAME_FIELD, b"\0")


def _read_filename(conn: socket.socket) -> str:
    return _text(_recv_exact(conn, FILENAME_FIELD))


def _local_path(directory: Union[str, os.PathLike], name: str) -> Path:
    if name in ("", ".", "..") or os.path.basename(name) != name or "/" in name or "\\" in name:
        raise ValueError(f"file name {name!r} must not contain a directory")
    return Path(directory) / name


def handle_echo(conn: socket.socket) -> List[str]:
    """Send every message back until the peer closes; return the messages echoed."""
    messages: List[str] = []
    while True:
        data = conn.recv(BUFFER_SIZE - 1)
        if not data:
            return messages
        conn.sendall(data)
        messages.append(_text(data))


def echo(conn: socket.socket, message: str) -> str:
    """Send ``message`` to an echo server and return what came back."""
    payload = message.encode("utf-8")
    if not payload:
        raise ValueError("message must not be empty")
    conn.sendall(payload)
    reply = bytearray()
    while len(reply) < len(payload):
        chunk = conn.recv(BUFFER_SIZE)
        if not chunk:
            raise ConnectionError("echo server closed the connection")
        reply.extend(chunk)
    return _text(bytes(reply))


def handle_hello(conn: socket.socket) -> str:
    """Read the client's greeting, answer with the server greeting, return the greeting read."""
    message = _text(conn.recv(BUFFER_SIZE))
    conn.sendall(SERVER_GREETING.encode())
    return message


def hello(conn: socket.socket) -> str:
    """Greet a stream server and return its reply."""
    conn.sendall(CLIENT_GREETING.encode())
    return _text(conn.recv(BUFFER_SIZE))


def handle_udp_hello(sock: socket.socket) -> Tuple[str, Address]:
    """Answer one datagram greeting; return the greeting and the sender's address."""
    data, address = sock.recvfrom(BUFFER_SIZE)
    sock.sendto(SERVER_GREETING.encode(), address)
    return _text(data), address


def udp_hello(sock: socket.socket, address: Address) -> str:
    """Send a datagram greeting to ``address`` and return the reply."""
    sock.sendto(CLIENT_GREETING.encode(), address)
    data, _ = sock.recvfrom(BUFFER_SIZE)
    return _text(data)


def relay_incoming(conn: socket.socket, output: TextIO, label: str) -> int:
    """Write each message read from ``conn`` to ``output`` until the peer closes.

    Returns the number of messages relayed.
    """
    count = 0
    while True:
        data = conn.recv(CHAT_BUFFER_SIZE)
        if not data:
            return count
        output.write(f"\n{label}: {_text(data)}\n")
        output.flush()
        count += 1


def chat(conn: socket.socket, lines: Iterable[str], output: TextIO, label: str) -> int:
    """Send ``lines`` while relaying the peer's messages to ``output`` under ``label``.

    When the lines run out the sending side is closed and the call waits for
    the peer to finish. Returns the number of lines sent.
    """
    receiver = threading.Thread(target=relay_incoming, args=(conn, output, label), daemon=True)
    receiver.start()
    sent = 0
    try:
        for line in lines:
            payload = line.encode("utf-8")
            if payload:
                conn.sendall(payload)
                sent += 1
    finally:
        conn.shutdown(socket.SHUT_WR)
        receiver.join()
    return sent


def handle_upload(conn: socket.socket, directory: Union[str, os.PathLike]) -> Path:
    """Receive a named file into ``directory`` and return where it was written."""
    target = _local_path(directory, _read_filename(conn))
    with target.open("wb") as handle:
        while True:
            chunk = conn.recv(BUFFER_SIZE)
            if not chunk:
                break
            handle.write(chunk)
    return target


def upload(conn: socket.socket, path: Union[str, os.PathLike]) -> int:
    """Send the file at ``path`` under its base name; return the bytes of content sent."""
    source = Path(path)
    data = source.read_bytes()
    conn.sendall(_pack_filename(source.name))
    conn.sendall(data)
    conn.shutdown(socket.SHUT_WR)
    return len(data)


def handle_download(conn: socket.socket, directory: Union[str, os.PathLike]) -> Optional[Path]:
    """Send the requested file from ``directory``, or a not-found notice.

    Returns the path sent, or None when the file does not exist.
    """
    target = _local_path(directory, _read_filename(conn))
    try:
        data = target.read_bytes()
    except FileNotFoundError:
        conn.sendall(NOT_FOUND.encode())
        conn.shutdown(socket.SHUT_WR)
        return None
    conn.sendall(data)
    conn.shutdown(socket.SHUT_WR)
    return target


def download(conn: socket.socket, filename: str) -> bytes:
    """Request ``filename`` and return everything the server sends back."""
    conn.sendall(_pack_filename(filename))
    return _recv_all(conn)
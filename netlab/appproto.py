"""Toy application protocols: DNS lookup, DHCP lease, SMTP mail and FTP greeting.

DNS and DHCP run over datagram sockets, SMTP and FTP over connected stream
sockets. Every ``handle_*`` function serves one exchange on a socket that is
already bound or connected. The matching client function runs the other side.
"""

import socket
from typing import Dict, List, Optional, Tuple, Union

DNS_PORT = 5353
DHCP_PORT = 6767
SMTP_PORT = 2525
FTP_PORT = 1825

DNS_TABLE: Dict[str, str] = {
    "example.com": "93.184.216.34",
    "openai.com": "104.19.155.92",
    "google.com": "142.250.190.14",
    "localhost": "127.0.0.1",
}
NOT_FOUND = "Domain not found"
_DNS_BUFFER = 100

OFFERED_ADDRESS = "192.168.1.100"
_DHCP_BUFFER = 512

SMTP_GREETING = "220 simple smtp server read\r\n"
MAIL_SENDER = "user@example.com"
MAIL_RECIPIENT = "receiver@example.com"
_DATA_REPLY = "354 End data with <CR><LF>.<CR><LF>\r\n"
_MAIL_SESSION = (
    "HELO client\r\n",
    f"MAIL FROM:<{MAIL_SENDER}>\r\n",
    f"RCPT TO:<{MAIL_RECIPIENT}>\r\n",
    "DATA\r\n",
    "Subject: Test Mail\r\nThis is a test.\r\n.\r\n",
    "QUIT\r\n",
)

FTP_WELCOME = "220 welcome to ftp server\r\n"
FTP_GOODBYE = "221 goodbye\r\n"

Address = Union[Tuple[str, int], str]


class ProtocolError(Exception):
    """Raised when a peer answers with a message the protocol does not allow."""


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def resolve(domain: str) -> Optional[str]:
    """Return the address recorded for ``domain``, or None when it is unknown."""
    return DNS_TABLE.get(domain)


def handle_dns(sock: socket.socket) -> Tuple[str, str]:
    """Answer one DNS query; return the query and the response sent."""
    data, client = sock.recvfrom(_DNS_BUFFER - 1)
    query = _text(data)
    response = resolve(query) or NOT_FOUND
    sock.sendto(response.encode(), client)
    return query, response


def query_dns(sock: socket.socket, address: Address, domain: str) -> Optional[str]:
    """Ask the DNS server at ``address`` for ``domain``; return its address or None."""
    payload = domain.encode("utf-8")
    if not payload or b"\0" in payload or len(payload) >= _DNS_BUFFER:
        raise ValueError(f"domain must be 1 to {_DNS_BUFFER - 1} bytes without NUL: {domain!r}")
    sock.sendto(payload, address)
    data, _ = sock.recvfrom(_DNS_BUFFER - 1)
    reply = _text(data)
    return None if reply == NOT_FOUND else reply


def handle_dhcp(sock: socket.socket) -> List[str]:
    """Serve one discover/offer/request/acknowledge exchange; return the client's messages."""
    discover, client = sock.recvfrom(_DHCP_BUFFER)
    sock.sendto(f"OFFER {OFFERED_ADDRESS}".encode(), client)
    request, client = sock.recvfrom(_DHCP_BUFFER)
    sock.sendto(f"ACK {OFFERED_ADDRESS}".encode(), client)
    return [_text(discover), _text(request)]


def _expect(sock: socket.socket, keyword: str) -> str:
    data, _ = sock.recvfrom(_DHCP_BUFFER)
    message = _text(data)
    parts = message.split()
    if len(parts) != 2 or parts[0] != keyword:
        raise ProtocolError(f"expected {keyword} with an address, got {message!r}")
    return parts[1]


def dhcp_lease(sock: socket.socket, address: Address) -> str:
    """Obtain an address from the DHCP server at ``address`` and return it."""
    sock.sendto(b"discover", address)
    offered = _expect(sock, "OFFER")
    sock.sendto(f"REQUEST {offered}".encode(), address)
    return _expect(sock, "ACK")


def smtp_reply(line: str) -> str:
    """Return the server's reply, CRLF included, to one SMTP command line."""
    command = line.rstrip("\r\n")
    if command.startswith("HELO"):
        return "250 hello client\r\n"
    if command.startswith("MAIL FROM"):
        return "250 OK\r\n"
    if command.startswith("RCPT TO"):
        return "250 OK\r\n"
    if command.startswith("DATA"):
        return _DATA_REPLY
    if command == ".":
        return "250 Message accepted\r\n"
    if command.startswith("QUIT"):
        return "221 Bye\r\n"
    return "500 Command unrecognized\r\n"


def handle_smtp(conn: socket.socket) -> List[str]:
    """Serve one SMTP session until QUIT or end of stream; return the lines received.

    Lines after DATA are message body and get no reply until the lone ".".
    """
    conn.sendall(SMTP_GREETING.encode())
    received: List[str] = []
    in_data = False
    with conn.makefile("rb") as reader:
        for raw in reader:
            line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            received.append(line)
            if in_data and line != ".":
                continue
            in_data = False
            reply = smtp_reply(line)
            conn.sendall(reply.encode())
            if reply == _DATA_REPLY:
                in_data = True
            elif line.startswith("QUIT"):
                break
    return received


def _read_reply(reader) -> str:
    line = reader.readline()
    if not line:
        raise ConnectionError("server closed the connection")
    return line.decode("utf-8", errors="replace").rstrip("\r\n")


def send_mail(conn: socket.socket) -> List[str]:
    """Send a test message through an SMTP server; return every reply, greeting first."""
    with conn.makefile("rb") as reader:
        replies = [_read_reply(reader)]
        for message in _MAIL_SESSION:
            conn.sendall(message.encode())
            replies.append(_read_reply(reader))
    return replies


def handle_ftp(conn: socket.socket) -> List[str]:
    """Greet an FTP client, say goodbye and close the sending side; return the replies sent."""
    replies = [FTP_WELCOME, FTP_GOODBYE]
    for reply in replies:
        conn.sendall(reply.encode())
    conn.shutdown(socket.SHUT_WR)
    return [reply.rstrip("\r\n") for reply in replies]


def ftp_greeting(conn: socket.socket) -> List[str]:
    """Read every reply line an FTP server sends until it closes."""
    with conn.makefile("rb") as reader:
        return [raw.decode("utf-8", errors="replace").rstrip("\r\n") for raw in reader]
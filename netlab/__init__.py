"""Computer-networks lab toolkit: error control, framing, line coding, routing, ARQ and socket services."""

__version__ = "0.1.0"

__all__ = [
    "appproto",
    "arq",
    "checksum",
    "cli",
    "compute",
    "crc",
    "framing",
    "hamming",
    "line_coding",
    "messaging",
    "routing",
    "stuffing",
]
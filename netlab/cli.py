"""Command-line front end for the error-control and framing tools."""

import argparse
import sys
from typing import List, Optional

from netlab import checksum, crc, framing, stuffing

_POLYNOMIALS = {"crc12": crc.CRC_12, "crc16": crc.CRC_16}


def _report(clean: bool) -> int:
    print("No Error" if clean else "Error Detected")
    return 0 if clean else 1


def _key(args: argparse.Namespace) -> str:
    return args.key if args.key is not None else _POLYNOMIALS[args.poly]


def _crc_encode(args: argparse.Namespace) -> int:
    print(f"Transmitted: {crc.encode(args.data, _key(args))}")
    return 0


def _crc_check(args: argparse.Namespace) -> int:
    return _report(not crc.has_error(args.received, _key(args)))


def _bit_stuff(args: argparse.Namespace) -> int:
    print(f"Stuffed message: {stuffing.bit_stuff(args.bits)}")
    return 0


def _bit_destuff(args: argparse.Namespace) -> int:
    print(f"Destuffed message: {stuffing.bit_destuff(args.bits)}")
    return 0


def _byte_stuff(args: argparse.Namespace) -> int:
    print("Stuffed: " + " ".join(stuffing.byte_stuff(args.words)))
    return 0


def _byte_destuff(args: argparse.Namespace) -> int:
    print("Destuffed: " + " ".join(stuffing.byte_destuff(args.words)))
    return 0


def _frame(args: argparse.Namespace) -> int:
    print(f"Framed: {framing.char_count_frame(args.data, args.size)}")
    return 0


def _deframe(args: argparse.Namespace) -> int:
    print(f"Original: {framing.char_count_deframe(args.framed)}")
    return 0


def _checksum(args: argparse.Namespace) -> int:
    value = checksum.nibble_checksum(args.a, args.b)
    print(f"Checksum: {value}")
    print(f"Data sent: {args.a} {args.b} {value}")
    return 0


def _checksum_verify(args: argparse.Namespace) -> int:
    return _report(checksum.verify_nibble_checksum(args.a, args.b, args.checksum))


def _add_key_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--poly", choices=sorted(_POLYNOMIALS), help="standard CRC polynomial")
    group.add_argument("--key", help="custom generator as a bit string")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="netlab", description="Error control and framing tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("crc-encode", help="append a CRC to data bits")
    p.add_argument("data")
    _add_key_options(p)
    p.set_defaults(handler=_crc_encode)

    p = commands.add_parser("crc-check", help="check received bits against a CRC")
    p.add_argument("received")
    _add_key_options(p)
    p.set_defaults(handler=_crc_check)

    p = commands.add_parser("bit-stuff", help="bit-stuff a bit string")
    p.add_argument("bits")
    p.set_defaults(handler=_bit_stuff)

    p = commands.add_parser("bit-destuff", help="remove bit stuffing")
    p.add_argument("bits")
    p.set_defaults(handler=_bit_destuff)

    p = commands.add_parser("byte-stuff", help="frame words with flags and escapes")
    p.add_argument("words", nargs="*")
    p.set_defaults(handler=_byte_stuff)

    p = commands.add_parser("byte-destuff", help="recover words from a stuffed frame")
    p.add_argument("words", nargs="*")
    p.set_defaults(handler=_byte_destuff)

    p = commands.add_parser("frame", help="character-count framing")
    p.add_argument("data")
    p.add_argument("size", type=int)
    p.set_defaults(handler=_frame)

    p = commands.add_parser("deframe", help="undo character-count framing")
    p.add_argument("framed")
    p.set_defaults(handler=_deframe)

    p = commands.add_parser("checksum", help="checksum of two 4-bit words")
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(handler=_checksum)

    p = commands.add_parser("checksum-verify", help="verify two 4-bit words and a checksum")
    p.add_argument("a")
    p.add_argument("b")
    p.add_argument("checksum")
    p.set_defaults(handler=_checksum_verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one command; exit status 1 means an error was detected, 2 bad input."""
    args = _parser().parse_args(argv)
    try:
        return args.handler(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
"""Bit stuffing for HDLC-style frames and word-level byte stuffing with flag/escape markers."""

from typing import Iterable, List, Union

FLAG = "flag"
ESC = "esc"
_RUN_LIMIT = 5


def _require_bits(bits: str) -> None:
    if not isinstance(bits, str) or set(bits) - {"0", "1"}:
        raise ValueError("bits must be a string of '0' and '1' characters")


def bit_stuff(bits: str) -> str:
    """Insert a '0' after every run of five consecutive '1' bits."""
    _require_bits(bits)
    out: List[str] = []
    run = 0
    for bit in bits:
        out.append(bit)
        if bit == "1":
            run += 1
            if run == _RUN_LIMIT:
                out.append("0")
                run = 0
        else:
            run = 0
    return "".join(out)


def bit_destuff(bits: str) -> str:
    """Remove the '0' that follows every run of five consecutive '1' bits."""
    _require_bits(bits)
    out: List[str] = []
    run = 0
    stream = iter(enumerate(bits))
    for index, bit in stream:
        out.append(bit)
        if bit == "1":
            run += 1
            if run == _RUN_LIMIT and bits[index + 1 : index + 2] == "0":
                next(stream)
                run = 0
        else:
            run = 0
    return "".join(out)


def _check_word(word: str) -> str:
    if not isinstance(word, str) or not word or any(ch.isspace() for ch in word):
        raise ValueError(f"invalid word {word!r}: words must be non-empty and contain no whitespace")
    return word


def byte_stuff(words: Iterable[str]) -> List[str]:
    """Frame ``words`` between flags, escaping any word equal to a flag or escape marker."""
    stuffed = [FLAG]
    for word in map(_check_word, words):
        if word in (FLAG, ESC):
            stuffed.append(ESC)
        stuffed.append(word)
    stuffed.append(FLAG)
    return stuffed


def byte_destuff(words: Union[str, Iterable[str]]) -> List[str]:
    """Recover the payload words of a stuffed frame.

    ``words`` may be a whitespace-separated string or an iterable of words.
    The first unescaped flag opens the frame and the second one closes it.
    """
    tokens = words.split() if isinstance(words, str) else words
    result: List[str] = []
    flags_seen = 0
    escape_next = False
    for word in tokens:
        if word == ESC and not escape_next:
            escape_next = True
            continue
        if word == FLAG and not escape_next:
            flags_seen += 1
            if flags_seen == 1:
                continue
            break
        result.append(word)
        escape_next = False
    return result
"""Character-count framing: each frame begins with a digit giving its length."""

from typing import List

MAX_FRAME_SIZE = 9 + 1


def char_count_frame(data: str, frame_size: int) -> str:
    """Split ``data`` into frames of at most ``frame_size`` characters, count included."""
    if not 2 <= frame_size <= MAX_FRAME_SIZE:
        raise ValueError(f"frame_size must be between 2 and {MAX_FRAME_SIZE}")
    step = frame_size - 1
    frames: List[str] = []
    for start in range(0, len(data), step):
        chunk = data[start : start + step]
        frames.append(f"{len(chunk) + 1}{chunk}")
    return "".join(frames)


def char_count_deframe(framed: str) -> str:
    """Recover the original data from a character-count framed string."""
    result: List[str] = []
    position = 0
    while position < len(framed):
        count_char = framed[position]
        if not count_char.isdigit() or not count_char.isascii():
            raise ValueError(f"expected a frame count at position {position}, found {count_char!r}")
        position += 1
        payload = framed[position : position + max(int(count_char) - 1, 0)]
        result.append(payload)
        position += len(payload)
    return "".join(result)
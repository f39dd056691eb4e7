"""Simulations of Go-Back-N and stop-and-wait automatic repeat request."""

import random
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

TOTAL_FRAMES = 10
WINDOW_SIZE = 4


@dataclass(frozen=True)
class WindowRound:
    """One window sent in Go-Back-N: frames sent, frame lost, frames received, last ACK."""

    sent: Tuple[int, ...]
    lost: Optional[int]
    received: Tuple[int, ...]
    ack: int


@dataclass(frozen=True)
class StopAndWaitEvent:
    """One transmission of a stop-and-wait frame and whether its ACK arrived."""

    frame: int
    acknowledged: bool


def go_back_n(
    total: int = TOTAL_FRAMES, window: int = WINDOW_SIZE, rng: Optional[random.Random] = None
) -> Iterator[WindowRound]:
    """Yield the rounds needed to deliver ``total`` frames; a window is lost one time in five."""
    if total < 0:
        raise ValueError("total must not be negative")
    if window < 1:
        raise ValueError("window must be at least 1")
    source = random.Random() if rng is None else rng

    def rounds() -> Iterator[WindowRound]:
        base = 0
        while base < total:
            end = min(base + window, total)
            if source.randrange(5) == 0:
                loss: int = base + source.randrange(end - base)
                lost: Optional[int] = loss
            else:
                loss, lost = end, None
            yield WindowRound(tuple(range(base, end)), lost, tuple(range(base, loss)), loss - 1)
            base = loss

    return rounds()


def stop_and_wait(frames: int, rng: Optional[random.Random] = None) -> Iterator[StopAndWaitEvent]:
    """Yield each transmission until ``frames`` frames are acknowledged; an ACK is lost one time in four."""
    if frames < 0:
        raise ValueError("frames must not be negative")
    source = random.Random() if rng is None else rng

    def events() -> Iterator[StopAndWaitEvent]:
        sequence = 0
        delivered = 0
        while delivered < frames:
            acknowledged = source.randrange(4) != 0
            yield StopAndWaitEvent(sequence, acknowledged)
            if acknowledged:
                delivered += 1
                sequence ^= 1

    return events()
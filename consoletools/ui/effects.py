"""
Blocking console animations.

Both routines hold the calling thread for the whole animation. Randomness,
sleep and the clock are parameters so tests can run them instantly.
"""

import logging
import random
import time
from typing import Callable, Optional

from .console import ConsoleIO, default_console

logger = logging.getLogger(__name__)

SPINNER_FRAMES = "|/-\\"

_default_rng = random.Random()


def print_typing_text_effect(
    text: str,
    min_delay_ms: int,
    max_delay_ms: int,
    *,
    io: Optional[ConsoleIO] = None,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep,
):
    """
    Print text one character at a time with a random pause after each.

    Args:
        text: Text to print (no newline is added)
        min_delay_ms: Shortest pause in milliseconds
        max_delay_ms: Longest pause in milliseconds (inclusive)
        io: Console to write to (process streams by default)
        rng: Source of randomness, anything with randint(a, b)
        sleep: Sleep function taking seconds
    """
    io = io or default_console()
    rng = rng or _default_rng

    low, high = max(0, min_delay_ms), max(0, max_delay_ms)
    if low > high:
        logger.debug("Typing delay range reversed (%d > %d), swapping", low, high)
        low, high = high, low

    for char in text:
        io.write(char, flush=True)
        sleep(rng.randint(low, high) / 1000)


def print_spinner(
    duration_ms: int,
    speed_ms: int,
    *,
    io: Optional[ConsoleIO] = None,
    frames: str = SPINNER_FRAMES,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
):
    """
    Spin in place until duration_ms has elapsed, then clear the glyph.

    Each frame is drawn as carriage return + glyph. At least one frame is
    always drawn, even for a zero duration.

    Args:
        duration_ms: Total run time in milliseconds
        speed_ms: Time between frames in milliseconds
        io: Console to write to (process streams by default)
        frames: Glyphs to cycle through
        sleep: Sleep function taking seconds
        clock: Monotonic clock returning seconds
    """
    io = io or default_console()
    frames = frames or SPINNER_FRAMES
    start = clock()
    index = 0
    drawn = 0

    while True:
        io.write(f"\r{frames[index]}", flush=True)
        index = (index + 1) % len(frames)
        drawn += 1

        sleep(max(0, speed_ms) / 1000)
        if (clock() - start) * 1000 >= duration_ms:
            break

    io.write("\r \n", flush=True)
    logger.debug("Spinner finished after %d frames", drawn)

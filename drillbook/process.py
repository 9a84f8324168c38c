"""Process helpers: start programs, pass messages through streams, capture output."""

from __future__ import annotations

import subprocess
import time
from collections.abc import Iterator, Sequence
from typing import IO


def spawn(program: str, args: Sequence[str]) -> subprocess.Popen:
    """Start ``program`` with the argument vector ``args`` and return the child.

    As with ``execvp``, ``args[0]`` is the name the child sees for itself and
    ``program`` is looked up on the search path. The caller may wait on the
    returned process; a program that cannot be started raises ``OSError``.
    """
    if not args:
        raise ValueError("args must hold at least the program name")
    return subprocess.Popen(list(args), executable=program)


def write_messages(
    stream: IO[str], message: str, count: int, interval: float = 1.0
) -> None:
    """Write ``message`` as a line ``count`` times, flushing and pausing after each."""
    if interval < 0:
        raise ValueError("interval must not be negative")
    for _ in range(count):
        stream.write(f"{message}\n")
        stream.flush()
        if interval:
            time.sleep(interval)


def read_messages(stream: IO[str]) -> Iterator[str]:
    """Yield each line read from ``stream`` without its line ending, until end of input."""
    for line in stream:
        yield line.rstrip("\n")


def capture_output(args: Sequence[str]) -> str:
    """Run the command ``args``, wait for it, and return what it wrote to stdout."""
    if not args:
        raise ValueError("args must hold at least the program name")
    completed = subprocess.run(
        list(args), stdout=subprocess.PIPE, text=True, check=False
    )
    return completed.stdout
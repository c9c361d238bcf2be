"""File, clock and message helpers."""

from __future__ import annotations

import os
import sys
import time

MAX_MESSAGE = 1024

_start_time: float | None = None


def output_message(message: str, *args) -> str:
    """Format ``message`` printf-style with ``args``, write it to stderr and return it.

    The text is cut to ``MAX_MESSAGE - 1`` characters.
    """
    text = message % args if args else message
    text = text[: MAX_MESSAGE - 1]
    sys.stderr.write(text)
    sys.stderr.flush()
    return text


def load_complete_file(filename: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file as bytes.

    Raises OSError if the file cannot be opened.
    """
    with open(filename, "rb") as handle:
        return handle.read()


def system_time() -> float:
    """Return a high resolution monotonic time in seconds."""
    return time.perf_counter()


def system_time_since_start() -> float:
    """Return seconds elapsed since this function was first called."""
    global _start_time
    if _start_time is None:
        _start_time = system_time()
    return system_time() - _start_time


def files_in_folder(path: str | os.PathLike[str], extension: str) -> list[str]:
    """Return the sorted names of entries in ``path`` whose name contains ``extension``."""
    with os.scandir(path) as entries:
        return sorted(entry.name for entry in entries if extension in entry.name)
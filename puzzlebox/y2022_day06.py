"""Tuning trouble: locating start markers in a datastream."""

from __future__ import annotations

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def all_distinct(window: str) -> bool:
    """Return True if no character repeats in ``window``."""
    return len(set(window)) == len(window)


def find_marker(data_stream: str, size: int = MESSAGE_MARKER_SIZE) -> int:
    """Return how many characters are read until ``size`` distinct ones end a window.

    If no such window exists, the length of the stream is returned.
    """
    if size < 1:
        raise ValueError("marker size must be positive")
    for end in range(size, len(data_stream) + 1):
        if all_distinct(data_stream[end - size:end]):
            return end
    return len(data_stream)
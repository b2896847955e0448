import pytest

from puzzlebox.y2022_day06 import (
    MESSAGE_MARKER_SIZE,
    PACKET_MARKER_SIZE,
    all_distinct,
    find_marker,
)

STREAMS = [
    "mjqjpqmgbljsphdztnvjfqwrcgsmlb",
    "bvwbjplbgvbhsrlpgdmjqwftvncz",
    "nppdvjthqldpwncqszvftbrmjlhg",
    "nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg",
    "zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw",
]


def test_all_distinct():
    assert all_distinct("abcd") is True
    assert all_distinct("abca") is False


def test_packet_marker_example():
    assert find_marker(STREAMS[0], PACKET_MARKER_SIZE) == 7


def test_message_marker_example():
    assert find_marker(STREAMS[0], MESSAGE_MARKER_SIZE) == 19


def test_default_size_is_message_marker():
    assert find_marker(STREAMS[1]) == find_marker(STREAMS[1], MESSAGE_MARKER_SIZE)


@pytest.mark.parametrize("stream", STREAMS)
@pytest.mark.parametrize("size", [PACKET_MARKER_SIZE, MESSAGE_MARKER_SIZE])
def test_marker_is_first_distinct_window(stream, size):
    end = find_marker(stream, size)
    assert size <= end <= len(stream)
    assert all_distinct(stream[end - size:end])
    assert not any(
        all_distinct(stream[earlier - size:earlier]) for earlier in range(size, end)
    )


def test_no_marker_returns_stream_length():
    stream = "aaaaaaa"
    assert find_marker(stream, PACKET_MARKER_SIZE) == len(stream)


def test_short_stream_returns_its_length():
    stream = "abc"
    assert find_marker(stream, PACKET_MARKER_SIZE) == len(stream)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        find_marker("abcd", 0)
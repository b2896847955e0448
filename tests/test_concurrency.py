from puzzlebox import concurrency

DELAY = 0.05


def test_concurrent_greetings_order():
    events = concurrency.concurrent_greetings(DELAY)
    assert events == [
        "Hello",
        "Ashish",
        "Working with Concurrency",
        "Ashish",
        "Hello",
    ]


def test_buffered_channel_leaves_tyler():
    events, pending = concurrency.buffered_channel_demo(DELAY)
    assert pending == "Tyler"
    assert events[:2] == ["Working with Concurrency", "Working with Buffered channel"]
    assert sorted(events[2:]) == ["Ashish", "Hello"]


def test_buffered_channel_receiver_gets_first_name():
    events, _ = concurrency.buffered_channel_demo(DELAY)
    assert events[2] == "Ashish"


def test_unbuffered_channel_hands_over():
    events = concurrency.unbuffered_channel_demo(DELAY)
    assert events == [
        "Working with Concurrency",
        "Working with UnBuffered channel",
        "Hello",
        "Tyler",
    ]
from __future__ import annotations

from tasktui.core import Observable

from .fakes import Recorder


def test_subscribers_receive_events_in_order() -> None:
    source = Observable[int]()
    calls: list[str] = []
    source.subscribe(lambda e: calls.append(f"a{e}"))
    source.subscribe(lambda e: calls.append(f"b{e}"))

    source.emit(1)

    assert calls == ["a1", "b1"]


def test_unsubscribe_stops_delivery() -> None:
    source = Observable[str]()
    events = Recorder[str]()
    unsubscribe = source.subscribe(events)

    source.emit("first")
    unsubscribe()
    unsubscribe()
    source.emit("second")

    assert events.events == ["first"]
    assert source.subscriber_count == 0


def test_failing_subscriber_does_not_block_others() -> None:
    source = Observable[int]()
    events = Recorder[int]()

    def broken(_event: int) -> None:
        raise RuntimeError("boom")

    source.subscribe(broken)
    source.subscribe(events)

    source.emit(3)

    assert events.events == [3]

"""Unit tests for the kernel clocks."""

from __future__ import annotations

from datetime import UTC, datetime

from esl.kernel.time import FrozenClock, SystemClock, unix_time


class TestClocks:
    def test_system_clock_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_system_clock_timestamp_moves_forward(self) -> None:
        clock = SystemClock()
        assert clock.timestamp() <= clock.timestamp()

    def test_frozen_clock(self) -> None:
        fixed = datetime(2026, 1, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.timestamp() == fixed.timestamp()

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        clock.advance(seconds=90)
        assert clock.now() == datetime(2026, 1, 1, 0, 1, 30, tzinfo=UTC)

    def test_unix_time_truncates(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, 0, 0, 0, 900_000, tzinfo=UTC))
        assert unix_time(clock) == int(datetime(2026, 1, 1, tzinfo=UTC).timestamp())

"""Shared test fixtures for interview-tool."""

from __future__ import annotations

import pytest

from interview_tool.instants import InstantRegistry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def instants(clock: FakeClock) -> InstantRegistry:
    """Instant registry driven by the fake clock."""
    return InstantRegistry(clock=clock)

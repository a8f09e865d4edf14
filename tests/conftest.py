"""
Pytest configuration and shared fixtures.

Provides a scripted Prompter (answers fed from a list) and a Timer driven
by a fake nanosecond clock so durations are deterministic.
"""

from collections import deque
from typing import Optional

import pytest

from algobench.runner import Timer


class ScriptedPrompter:
    """Prompter that replays canned answers and records everything said."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = deque(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt: {prompt!r}")
        return self.answers.popleft()

    def say(self, message: str, style: Optional[str] = None) -> None:
        self.messages.append(message)

    @property
    def transcript(self) -> str:
        return "\n".join(self.messages)


class FakeClock:
    """Returns successive readings, advancing by a fixed or scripted step."""

    def __init__(self, steps: Optional[list[int]] = None, step: int = 1_000) -> None:
        self.now = 0
        self.steps = deque(steps or [])
        self.step = step

    @classmethod
    def spans(cls, durations: list[int]) -> "FakeClock":
        """Clock whose successive start/stop spans last the given nanoseconds."""
        steps = []
        for d in durations:
            steps.extend([d, 0])
        return cls(steps=steps)

    def __call__(self) -> int:
        reading = self.now
        self.now += self.steps.popleft() if self.steps else self.step
        return reading


@pytest.fixture
def prompter_factory():
    """Build a ScriptedPrompter from a list of answers."""
    return ScriptedPrompter


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def quiet_timer_factory():
    """Timer factory without GC pass or sleep, on a shared fake clock."""

    def make(clock=None):
        clock = clock or FakeClock()
        return lambda: Timer(clock=clock, settle_s=0.0, collect=lambda: None)

    return make


@pytest.fixture
def clock_with_spans():
    """Build a FakeClock whose start/stop spans are the given nanoseconds."""
    return FakeClock.spans

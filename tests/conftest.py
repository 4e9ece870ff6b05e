"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


class RecordingObserver:
    """Display observer that snapshots the engine text on every change."""

    def __init__(self) -> None:
        self.engine = None
        self.texts: list[str] = []

    def display_did_change(self) -> None:
        self.texts.append(self.engine.text)

    @property
    def calls(self) -> int:
        return len(self.texts)


@pytest.fixture
def engine():
    """Provide a fresh ExpressionEngine."""
    from countonme import ExpressionEngine

    return ExpressionEngine()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def observed_engine(observer):
    """Provide an ExpressionEngine wired to a RecordingObserver."""
    from countonme import ExpressionEngine

    engine = ExpressionEngine(observer=observer)
    observer.engine = engine
    return engine


@pytest.fixture
def type_keys():
    """Feed space-separated keystrokes into an engine."""

    def _type(engine, keys: str) -> None:
        for key in keys.split():
            if key in "+-*/":
                engine.append_operator(key)
            else:
                for char in key:
                    engine.append_numeral(char)

    return _type

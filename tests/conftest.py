"""Shared fixtures for the DINORUN test suite."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dinorun.core.events import EventBus
from dinorun.core.state import GameMode, StateMachine
from dinorun.game.rng import RandomProvider
from dinorun.game.session import GameSession
from dinorun.screens.manager import ScreenController


class ScriptedRandom(RandomProvider):
    """RandomProvider that hands out queued values instead of drawing."""

    def __init__(self, ints=(), floats=()):
        super().__init__(seed=0)
        self.ints = list(ints)
        self.floats = list(floats)
        self.int_calls = []
        self.float_calls = []

    def range_int(self, low, high):
        self.int_calls.append((low, high))
        return self.ints.pop(0)

    def range_float(self, low, high):
        self.float_calls.append((low, high))
        return self.floats.pop(0)


@pytest.fixture
def rng():
    return RandomProvider(seed=1234)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def session(rng, event_bus):
    return GameSession(
        rng=rng,
        state_machine=StateMachine(GameMode.MENU),
        event_bus=event_bus,
    )


@pytest.fixture
def playing_session(session):
    session.restart()
    return session


@pytest.fixture
def controller(session, event_bus):
    return ScreenController(session, event_bus=event_bus)

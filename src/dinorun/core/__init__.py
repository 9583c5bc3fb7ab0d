"""Core framework components for DINORUN."""

from .state import GameMode, StateMachine
from .events import EventBus, Event, EventType, Key

__all__ = ["GameMode", "StateMachine", "EventBus", "Event", "EventType", "Key"]

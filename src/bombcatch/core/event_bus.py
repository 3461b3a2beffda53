"""In-memory event bus the host drains once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Event:
    """Runtime event payload."""

    name: str
    time: float
    payload: dict[str, Any]


class EventBus:
    """Collects game events so the host can react to score, explosions and game over."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def emit(self, name: str, time: float, **payload: Any) -> None:
        self._events.append(Event(name=name, time=time, payload=payload))

    @property
    def events(self) -> list[Event]:
        return self._events

    def of(self, name: str) -> list[Event]:
        return [event for event in self._events if event.name == name]

    def drain(self) -> list[Event]:
        events = self._events[:]
        self._events.clear()
        return events

"""Observer pattern primitives used to report state changes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Observer(ABC):
    """Something that wants to hear when a subject's state changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a state change of an observed subject."""


class Subject:
    """Keeps a list of observers and notifies them on demand."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The currently registered observers, in registration order."""
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; the same one may be added more than once."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Unregister every registration of the given observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        """Call ``update`` on every registered observer."""
        for observer in list(self._observers):
            observer.update()


class UI(Observer):
    """Observer that reports changes on a text stream and counts them."""

    MESSAGE = "[UI] Character's state has changed!"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.updates = 0

    def update(self) -> None:
        self.updates += 1
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(self.MESSAGE + "\n")
"""Change notification for state containers that are mirrored to storage."""

from collections.abc import Callable
from contextlib import contextmanager
from typing import Any

Listener = Callable[[Any], None]


class Observable:
    """Calls every subscribed listener with ``self`` after each committed change.

    ``_batch()`` holds notifications back until the block exits, so a multi-field
    change (e.g. a reset) reaches listeners once.
    """

    def __init__(self):
        self._listeners: list[Listener] = []
        self._held = 0
        self._pending = False

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self, *_: Any) -> None:
        if self._held:
            self._pending = True
            return
        for listener in list(self._listeners):
            listener(self)

    @contextmanager
    def _batch(self):
        self._held += 1
        try:
            yield
        finally:
            self._held -= 1
        if not self._held and self._pending:
            self._pending = False
            self._notify()

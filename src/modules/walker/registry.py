"""Ordered, fixed set of listeners for one walker."""
from typing import Any, Iterable, Iterator, Tuple


def supports(listener: Any, message: str) -> bool:
    """Whether ``listener`` implements a handler named ``message``."""
    return callable(getattr(listener, message, None))


class ListenerRegistry:
    """Holds listeners in insertion order. The order never changes."""

    def __init__(self, listeners: Iterable[Any] = ()):
        self._listeners: Tuple[Any, ...] = tuple(listeners)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def capable(self, message: str) -> Iterator[Any]:
        """Yield the listeners that implement ``message``, in order."""
        for listener in self._listeners:
            if supports(listener, message):
                yield listener

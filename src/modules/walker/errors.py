from typing import Any


class ListenerError(Exception):
    """A listener callback raised while handling an event."""

    def __init__(self, listener: Any, message: str, error: BaseException):
        self.listener = listener
        self.message = message
        self.error = error
        super().__init__(
            f"Listener {type(listener).__name__} failed in {message}: {error}"
        )

"""Dispatch of walker events to listeners."""
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Iterator, List, Optional, Union

from ..logging import BaseLogger
from .config import ListenerErrorPolicy
from .errors import ListenerError
from .events import Event, EventName, event_name
from .registry import ListenerRegistry


class Broadcaster:
    """Sends events to every capable listener, in registry order.

    Listeners that do not implement a message are skipped. A bracketed
    event sends ``before_<name>``, runs its work and then sends
    ``after_<name>``; the after phase runs even when the work raises,
    and the work's exception is never swallowed.
    """

    def __init__(
        self,
        registry: ListenerRegistry,
        logger: BaseLogger,
        error_policy: ListenerErrorPolicy = ListenerErrorPolicy.ISOLATE
    ):
        """
        Initialize the broadcaster.

        Args:
            registry: Listeners to notify
            logger: Logger for dispatch tracing and listener failures
            error_policy: What to do when a listener callback raises
        """
        self.registry = registry
        self.logger = logger
        self.error_policy = error_policy

    def broadcast(
        self,
        name: Union[str, EventName],
        *args: Any,
        work: Optional[Callable[[], Any]] = None
    ) -> None:
        """Broadcast ``name`` atomically, or bracketed around ``work`` when given."""
        self.dispatch(Event.create(name, args, bracketed=work is not None), work)

    def dispatch(self, event: Event, work: Optional[Callable[[], Any]] = None) -> None:
        if not event.bracketed:
            for message in event.messages:
                self.send_to_all(message, *event.args)
            return
        with self._bracket(event):
            if work is not None:
                work()

    def bracket(self, name: Union[str, EventName], *args: Any) -> ContextManager[None]:
        """Wrap the body of a ``with`` block in before/after notifications."""
        return self._bracket(Event.create(name, args, bracketed=True))

    @contextmanager
    def _bracket(self, event: Event) -> Iterator[None]:
        opening, closing = event.messages
        self.send_to_all(opening, *event.args)
        try:
            yield
        finally:
            self.send_to_all(closing, *event.args)

    def send_to_all(self, message: Union[str, EventName], *args: Any) -> None:
        message = event_name(message)
        failures: List[ListenerError] = []
        for listener in self.registry.capable(message):
            failure = self._deliver(listener, message, args)
            if failure is not None:
                failures.append(failure)

        # Failures are reported once every listener has seen the message
        for failure in failures:
            self._isolate(failure)

    def _deliver(self, listener: Any, message: str, args: tuple) -> Optional[ListenerError]:
        self.logger.log_dispatch(message, type(listener).__name__)
        try:
            getattr(listener, message)(*args)
        except Exception as e:
            if self.error_policy == ListenerErrorPolicy.RAISE:
                raise
            return ListenerError(listener, message, e)
        return None

    def _isolate(self, failure: ListenerError) -> None:
        """Log a listener failure and report it to the other listeners."""
        self.logger.log_error(str(failure))
        if failure.message == EventName.LISTENER_ERROR.value:
            return

        for other in self.registry.capable(EventName.LISTENER_ERROR.value):
            if other is failure.listener:
                continue
            try:
                other.listener_error(failure)
            except Exception as e:
                self.logger.log_error(str(ListenerError(other, EventName.LISTENER_ERROR.value, e)))

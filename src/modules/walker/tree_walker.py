"""Walks the step tree, running scenarios and notifying listeners."""
from typing import Any, Callable, Iterable, Optional, Union

from ..logging import BaseLogger
from .broadcaster import Broadcaster
from .config import WalkerConfig
from .events import EventName, VISIT_PREFIX
from .registry import ListenerRegistry


class TreeWalker:
    """Visitor handed to the step tree.

    Explicit visit methods shape the step events. Any other ``visit_<name>``
    call made by a node is forwarded as a ``<name>`` broadcast, atomic
    unless the node passes ``work=``, so new node kinds can be reported
    without touching this class.
    """

    def __init__(
        self,
        runtime: Any,
        listeners: Iterable[Any] = (),
        configuration: Optional[WalkerConfig] = None,
        logger: Optional[BaseLogger] = None
    ):
        """
        Initialize the walker.

        Args:
            runtime: Collaborator providing ``with_hooks`` and ``invoke_step``
            listeners: Observers, notified in the given order
            configuration: Walker settings, defaults when omitted
            logger: Logger instance, the runtime's logger when omitted
        """
        self.runtime = runtime
        self.configuration = configuration or WalkerConfig()
        self.logger = logger or runtime.logger
        self.listeners = ListenerRegistry(listeners)
        self._broadcaster = Broadcaster(
            self.listeners,
            self.logger,
            self.configuration.listener_errors
        )

    def execute(self, scenario: Any, skip_hooks: bool = False) -> Any:
        """Run ``scenario``'s steps inside the runtime's hook scope."""
        dry_run = self.configuration.dry_run
        self.logger.log_scenario(getattr(scenario, "name", type(scenario).__name__))

        def body():
            if scenario.failed() or dry_run:
                scenario.skip_invocation()
            scenario.steps.accept(self)

        return self.runtime.with_hooks(scenario, skip_hooks or dry_run, body)

    def __getattr__(self, message: str) -> Callable[..., 'TreeWalker']:
        if not message.startswith(VISIT_PREFIX):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{message}'")

        def forward(*args: Any, work: Optional[Callable[[], Any]] = None) -> 'TreeWalker':
            return self.broadcast(message, *args, work=work)

        return forward

    def visit_step_result(self, keyword, step_match, multiline_arg, status, exception,
                          source_indent, background, location) -> 'TreeWalker':
        with self._broadcaster.bracket(EventName.STEP_RESULT, keyword, step_match, multiline_arg,
                                       status, exception, source_indent, background, location):
            self.visit_step_name(keyword, step_match, status, source_indent, background, location)
            if multiline_arg is not None:
                self.visit_multiline_arg(multiline_arg)
            if exception is not None:
                self.visit_exception(exception, status)
        return self

    def visit_step_name(self, keyword, step_match, status, source_indent, background, location) -> 'TreeWalker':
        args = (keyword, step_match, status, source_indent, background, location)
        with self._broadcaster.bracket(EventName.STEP_NAME, *args):
            self._broadcaster.send_to_all(EventName.STEP_NAME, *args)
        return self

    def visit_multiline_arg(self, multiline_arg: Any) -> 'TreeWalker':
        with self._broadcaster.bracket(EventName.MULTILINE_ARG, multiline_arg):
            multiline_arg.accept(self)
        return self

    def visit_exception(self, exception: BaseException, status: Any) -> 'TreeWalker':
        with self._broadcaster.bracket(EventName.EXCEPTION, exception, status):
            self._broadcaster.send_to_all(EventName.EXCEPTION, exception, status)
        return self

    def puts(self, *messages: Any) -> 'TreeWalker':
        """Print ``messages`` through the listeners. Callable from step definitions."""
        return self.broadcast(EventName.PUTS, *messages)

    def embed(self, file: str, mime_type: str, label: str) -> 'TreeWalker':
        """Attach ``file`` to the report. Most listeners ignore this."""
        return self.broadcast(EventName.EMBED, file, mime_type, label)

    def broadcast(
        self,
        name: Union[str, EventName],
        *args: Any,
        work: Optional[Callable[[], Any]] = None
    ) -> 'TreeWalker':
        self._broadcaster.broadcast(name, *args, work=work)
        return self

"""Runtime collaborator: scenario hooks and step invocation."""
from typing import Any, Callable, List, Optional, TypeVar

from ..logging import BaseLogger
from ..scenario.model import Step, StepStatus
from .errors import PendingStepError
from .hooks import Hook

T = TypeVar('T')


class Runtime:
    """Runs hooks around scenarios and invokes step definitions."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger
        self._before_hooks: List[Hook] = []
        self._after_hooks: List[Hook] = []

    @staticmethod
    def _register(hooks: List[Hook], name: str, handler: Callable[[Any], Any], order: int) -> None:
        # Replace a hook registered under the same name
        for existing in hooks:
            if existing.name == name:
                existing.handler = handler
                existing.order = order
                hooks.sort(key=lambda h: h.order)
                return

        hooks.append(Hook(name, handler, order))
        # Stable sort keeps registration order within the same order value
        hooks.sort(key=lambda h: h.order)

    def register_before_hook(self, name: str, handler: Callable[[Any], Any], order: int = 0) -> None:
        """Register a hook run before each scenario's steps.

        Args:
            name: Name of the hook
            handler: Callable receiving the scenario
            order: Lower numbers run first
        """
        self._register(self._before_hooks, name, handler, order)

    def register_after_hook(self, name: str, handler: Callable[[Any], Any], order: int = 0) -> None:
        """Register a hook run after each scenario's steps, even when they fail."""
        self._register(self._after_hooks, name, handler, order)

    def _run_hooks(self, hooks: List[Hook], scenario: Any) -> None:
        for hook in hooks:
            self.logger.log_debug(f"Running hook: {hook.name}")
            hook.run(scenario)

    def _run_after_hooks(self, scenario: Any) -> Optional[Exception]:
        """Run every after hook, returning the first failure."""
        first_error: Optional[Exception] = None
        for hook in self._after_hooks:
            self.logger.log_debug(f"Running hook: {hook.name}")
            try:
                hook.run(scenario)
            except Exception as e:
                self.logger.log_error(f"Error in hook {hook.name}: {str(e)}")
                if first_error is None:
                    first_error = e
        return first_error

    def with_hooks(self, scenario: Any, skip_hooks: bool, body: Callable[[], T]) -> T:
        """
        Execute ``body`` inside the hook scope of ``scenario``.

        After hooks run even when a before hook or ``body`` raises; the
        exception then propagates unchanged. Every after hook runs even when
        an earlier one fails. Their failures are logged and the first one is
        raised once the last hook has finished.
        """
        if skip_hooks:
            return body()

        try:
            self._run_hooks(self._before_hooks, scenario)
            result = body()
        except BaseException:
            self._run_after_hooks(scenario)
            raise

        hook_error = self._run_after_hooks(scenario)
        if hook_error is not None:
            raise hook_error
        return result

    def invoke_step(self, step: Step) -> None:
        """Compute ``step``'s status by running its step definition.

        A step that already carries a status (a replayed result) is left
        untouched.
        """
        if step.status is not None:
            return
        if step.step_match is None or not step.step_match.defined:
            step.status = StepStatus.UNDEFINED
            return

        try:
            step.step_match.invoke(step.multiline_arg)
            step.status = StepStatus.PASSED
        except PendingStepError:
            step.status = StepStatus.PENDING
        except Exception as e:
            self.logger.log_debug(f"Step failed: {step.name}: {e}")
            step.status = StepStatus.FAILED
            step.exception = e

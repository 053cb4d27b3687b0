"""Event kinds and naming rules for walker broadcasts."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple, Union

VISIT_PREFIX = "visit_"
BEFORE_PREFIX = "before_"
AFTER_PREFIX = "after_"


class EventName(str, Enum):
    """Event kinds emitted by the walker and the step tree.

    The set is open: any string is a valid event name, these are the ones
    the bundled step tree and formatters know about.
    """
    FEATURE = "feature"
    FEATURE_NAME = "feature_name"
    FEATURE_ELEMENT = "feature_element"
    SCENARIO_NAME = "scenario_name"
    STEPS = "steps"
    STEP_RESULT = "step_result"
    STEP_NAME = "step_name"
    MULTILINE_ARG = "multiline_arg"
    TABLE_ROW = "table_row"
    TABLE_CELL_VALUE = "table_cell_value"
    DOC_STRING = "doc_string"
    EXCEPTION = "exception"
    PUTS = "puts"
    EMBED = "embed"
    LISTENER_ERROR = "listener_error"


class EventMode(str, Enum):
    ATOMIC = "atomic"
    BRACKETED = "bracketed"


def event_name(name: Union[str, EventName]) -> str:
    """Resolve an event name, dropping a leading ``visit_`` prefix.

    ``visit_step_name`` and ``step_name`` both resolve to ``step_name``.
    """
    if isinstance(name, EventName):
        return name.value
    if name.startswith(VISIT_PREFIX):
        return name[len(VISIT_PREFIX):]
    return name


def before(name: Union[str, EventName]) -> str:
    return BEFORE_PREFIX + event_name(name)


def after(name: Union[str, EventName]) -> str:
    return AFTER_PREFIX + event_name(name)


@dataclass(frozen=True)
class Event:
    """A single dispatch: a resolved name, its arguments and its mode."""
    name: str
    args: Tuple[Any, ...] = field(default_factory=tuple)
    mode: EventMode = EventMode.ATOMIC

    @classmethod
    def create(cls, name: Union[str, EventName], args: Tuple[Any, ...] = (), bracketed: bool = False) -> 'Event':
        mode = EventMode.BRACKETED if bracketed else EventMode.ATOMIC
        return cls(event_name(name), tuple(args), mode)

    @property
    def bracketed(self) -> bool:
        return self.mode == EventMode.BRACKETED

    @property
    def messages(self) -> Tuple[str, ...]:
        """Listener method names this event is delivered to, in order."""
        if self.bracketed:
            return (before(self.name), after(self.name))
        return (self.name,)

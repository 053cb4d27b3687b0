"""Step tree nodes. Each node reports itself to a visitor via ``accept``."""
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union


class StepStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    UNDEFINED = "undefined"
    PENDING = "pending"


@dataclass(frozen=True)
class Location:
    file: str
    line: int

    @classmethod
    def parse(cls, text: str) -> 'Location':
        """Parse ``path/to/file.feature:12``."""
        file, sep, line = text.rpartition(":")
        if not sep or not file or not line.isdigit():
            raise ValueError(f"Invalid location '{text}', expected 'file:line'")
        return cls(file, int(line))

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass
class StepMatch:
    """A step definition matched to a step, with the captured arguments."""
    name: str
    fn: Optional[Callable[..., Any]] = None
    args: Tuple[Any, ...] = ()

    @property
    def defined(self) -> bool:
        return self.fn is not None

    def invoke(self, multiline_arg: Any = None) -> Any:
        if multiline_arg is not None:
            return self.fn(*self.args, multiline_arg)
        return self.fn(*self.args)

    def __str__(self) -> str:
        return self.name


@dataclass
class Table:
    rows: List[List[str]]

    def accept(self, visitor: Any) -> None:
        for row in self.rows:
            visitor.visit_table_row(row, work=partial(self._accept_cells, visitor, row))

    @staticmethod
    def _accept_cells(visitor: Any, row: List[str]) -> None:
        for value in row:
            visitor.visit_table_cell_value(value)


@dataclass
class DocString:
    content: str
    content_type: str = ""

    def accept(self, visitor: Any) -> None:
        visitor.visit_doc_string(self.content)


MultilineArg = Union[Table, DocString]


@dataclass
class Embedding:
    file: str
    mime_type: str
    label: str = ""


@dataclass
class Step:
    keyword: str
    name: str
    step_match: Optional[StepMatch] = None
    multiline_arg: Optional[MultilineArg] = None
    status: Optional[StepStatus] = None
    exception: Optional[BaseException] = None
    source_indent: int = 0
    background: bool = False
    location: Optional[Location] = None
    messages: List[str] = field(default_factory=list)
    embeddings: List[Embedding] = field(default_factory=list)
    invocation_skipped: bool = False

    def failed(self) -> bool:
        return self.status == StepStatus.FAILED

    def skip_invocation(self) -> None:
        """Report this step without running it. A known status is kept."""
        self.invocation_skipped = True
        if self.status is None:
            self.status = StepStatus.SKIPPED

    def accept(self, visitor: Any) -> None:
        if not self.invocation_skipped:
            visitor.runtime.invoke_step(self)
        for message in self.messages:
            visitor.puts(message)
        for embedding in self.embeddings:
            visitor.embed(embedding.file, embedding.mime_type, embedding.label)

        visitor.visit_step_result(
            self.keyword,
            self.step_match,
            self.multiline_arg,
            self.status,
            self.exception,
            self.source_indent,
            self.background,
            self.location
        )


class StepCollection:
    """Ordered steps of a scenario. Steps after a failure are not invoked."""

    def __init__(self, steps: Sequence[Step] = ()):
        self.steps: List[Step] = list(steps)

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def failed(self) -> bool:
        return any(step.failed() for step in self.steps)

    def skip_invocation(self) -> None:
        for step in self.steps:
            step.skip_invocation()

    def accept(self, visitor: Any) -> None:
        visitor.visit_steps(self, work=partial(self._accept_steps, visitor))

    def _accept_steps(self, visitor: Any) -> None:
        failed = False
        for step in self.steps:
            if failed:
                step.skip_invocation()
            step.accept(visitor)
            failed = failed or step.failed()


class Scenario:
    def __init__(
        self,
        name: str,
        steps: Sequence[Step] = (),
        keyword: str = "Scenario",
        location: Optional[Location] = None,
        skip_hooks: bool = False
    ):
        self.name = name
        self.keyword = keyword
        self.location = location
        self.skip_hooks = skip_hooks
        self.steps = StepCollection(steps)

    def failed(self) -> bool:
        return self.steps.failed()

    def skip_invocation(self) -> None:
        self.steps.skip_invocation()

    def accept(self, visitor: Any) -> None:
        visitor.visit_feature_element(self, work=partial(self._accept_children, visitor))

    def _accept_children(self, visitor: Any) -> None:
        visitor.visit_scenario_name(self.keyword, self.name, self.location)
        visitor.execute(self, self.skip_hooks)


class Feature:
    def __init__(self, name: str, scenarios: Sequence[Scenario] = (), keyword: str = "Feature"):
        self.name = name
        self.keyword = keyword
        self.scenarios: List[Scenario] = list(scenarios)

    def accept(self, visitor: Any) -> None:
        visitor.visit_feature(self, work=partial(self._accept_children, visitor))

    def _accept_children(self, visitor: Any) -> None:
        visitor.visit_feature_name(self.keyword, self.name)
        for scenario in self.scenarios:
            scenario.accept(visitor)

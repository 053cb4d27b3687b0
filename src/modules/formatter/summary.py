"""Scenario and step totals, printed after the feature."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Optional, TextIO

import click

from ..scenario.model import StepStatus

# Worst status first; a scenario takes the worst status of its steps
STATUS_ORDER = [
    StepStatus.FAILED,
    StepStatus.UNDEFINED,
    StepStatus.PENDING,
    StepStatus.SKIPPED,
    StepStatus.PASSED,
]


@dataclass
class StatusCounters:
    """Tracks scenario and step totals by status."""
    scenarios: Counter = field(default_factory=Counter)
    steps: Counter = field(default_factory=Counter)


def _worst(statuses: List[StepStatus]) -> StepStatus:
    for status in STATUS_ORDER:
        if status in statuses:
            return status
    return StepStatus.PASSED


def _format_line(noun: str, counts: Counter) -> str:
    total = sum(counts.values())
    parts = [f"{counts[status]} {status.value}" for status in STATUS_ORDER if counts[status]]
    line = f"{total} {noun}{'' if total == 1 else 's'}"
    return f"{line} ({', '.join(parts)})" if parts else line


class SummaryFormatter:
    """Counts step results per status and prints cucumber style totals."""

    def __init__(self, io: Optional[TextIO] = None, quiet: bool = False):
        self.io = io
        self.quiet = quiet
        self.counts = StatusCounters()
        self._current: List[StepStatus] = []

    def before_feature_element(self, scenario: Any) -> None:
        self._current = []

    def before_step_result(self, keyword, step_match, multiline_arg, status, exception,
                           source_indent, background, location) -> None:
        status = StepStatus(status) if status is not None else StepStatus.UNDEFINED
        self.counts.steps[status] += 1
        self._current.append(status)

    def after_feature_element(self, scenario: Any) -> None:
        self.counts.scenarios[_worst(self._current)] += 1

    def failed(self, strict: bool = False) -> bool:
        """Whether the walk should count as a failure."""
        if self.counts.steps[StepStatus.FAILED]:
            return True
        if strict:
            return bool(self.counts.steps[StepStatus.UNDEFINED] or self.counts.steps[StepStatus.PENDING])
        return False

    def summary(self) -> str:
        return "\n".join([
            _format_line("scenario", self.counts.scenarios),
            _format_line("step", self.counts.steps),
        ])

    def after_feature(self, feature: Any) -> None:
        if not self.quiet:
            click.echo(self.summary(), file=self.io)

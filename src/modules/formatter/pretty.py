"""Human readable, colored report."""
from typing import Any, Optional, TextIO

import click

from ..scenario.model import StepStatus

STATUS_COLORS = {
    StepStatus.PASSED: "green",
    StepStatus.FAILED: "red",
    StepStatus.SKIPPED: "cyan",
    StepStatus.UNDEFINED: "yellow",
    StepStatus.PENDING: "yellow",
}

UNMATCHED_STEP = "(no matching step definition)"


def step_text(step_match: Any) -> str:
    return UNMATCHED_STEP if step_match is None else str(step_match)


class PrettyFormatter:
    """Prints the feature as it is walked, steps colored by status."""

    def __init__(self, io: Optional[TextIO] = None, color: Optional[bool] = None):
        self.io = io
        self.color = color

    def _echo(self, text: str, **style: Any) -> None:
        if style:
            text = click.style(text, **style)
        click.echo(text, file=self.io, color=self.color)

    def feature_name(self, keyword: str, name: str) -> None:
        self._echo(f"{keyword}: {name}", bold=True)
        self._echo("")

    def scenario_name(self, keyword: str, name: str, location: Any) -> None:
        line = f"  {keyword}: {name}"
        if location is not None:
            line += click.style(f"  # {location}", fg="bright_black")
        self._echo(line)

    def step_name(self, keyword, step_match, status, source_indent, background, location) -> None:
        color = STATUS_COLORS.get(status, "white")
        line = click.style(f"{' ' * source_indent}{keyword} {step_text(step_match)}", fg=color)
        if location is not None:
            line += click.style(f"  # {location}", fg="bright_black")
        self._echo(line)

    def after_table_row(self, row) -> None:
        self._echo("      | " + " | ".join(row) + " |", fg="cyan")

    def doc_string(self, content: str) -> None:
        self._echo('      """', fg="cyan")
        for line in content.splitlines():
            self._echo(f"      {line}", fg="cyan")
        self._echo('      """', fg="cyan")

    def exception(self, exception: BaseException, status: Any) -> None:
        for line in str(exception).splitlines():
            self._echo(f"      {line}", fg="red")

    def puts(self, *messages: Any) -> None:
        for message in messages:
            self._echo(f"      {message}", fg="cyan")

    def embed(self, file: str, mime_type: str, label: str) -> None:
        self._echo(f"      Embedded {label or file} ({mime_type})", fg="bright_black")

    def listener_error(self, error: Any) -> None:
        self._echo(f"Listener error: {error}", fg="yellow", bold=True)

    def after_feature_element(self, scenario: Any) -> None:
        self._echo("")

"""Machine readable report written when the feature has been walked."""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

import click

from .pretty import step_text


def _status_value(status: Any) -> Optional[str]:
    return getattr(status, "value", status)


class JsonFormatter:
    """Collects the walk into a feature -> scenarios -> steps document."""

    def __init__(self, output_file: Optional[str] = None, io: Optional[TextIO] = None):
        """Initialize the JSON formatter.

        Args:
            output_file: Path to write the report to; ``io``/stdout when omitted
            io: Stream used when no output file is given
        """
        self.output_file = Path(output_file) if output_file else None
        self.io = io
        self.document: Dict[str, Any] = {}
        self._scenario: Optional[Dict[str, Any]] = None
        self._step: Optional[Dict[str, Any]] = None
        self._output: List[str] = []
        self._embeddings: List[Dict[str, str]] = []

    def before_feature(self, feature: Any) -> None:
        self.document = {
            'keyword': feature.keyword,
            'name': feature.name,
            'elements': []
        }

    def before_feature_element(self, scenario: Any) -> None:
        self._scenario = {
            'keyword': scenario.keyword,
            'name': scenario.name,
            'location': str(scenario.location) if scenario.location else None,
            'steps': []
        }
        self.document.setdefault('elements', []).append(self._scenario)

    def puts(self, *messages: Any) -> None:
        self._output.extend(str(message) for message in messages)

    def embed(self, file: str, mime_type: str, label: str) -> None:
        self._embeddings.append({'file': file, 'mime_type': mime_type, 'label': label})

    def before_step_result(self, keyword, step_match, multiline_arg, status, exception,
                           source_indent, background, location) -> None:
        result: Dict[str, Any] = {'status': _status_value(status)}
        if exception is not None:
            result['error_message'] = str(exception)

        self._step = {
            'keyword': keyword,
            'name': step_text(step_match),
            'location': str(location) if location else None,
            'background': background,
            'result': result
        }
        if self._output:
            self._step['output'] = self._output
            self._output = []
        if self._embeddings:
            self._step['embeddings'] = self._embeddings
            self._embeddings = []

        if self._scenario is not None:
            self._scenario['steps'].append(self._step)

    def after_table_row(self, row) -> None:
        if self._step is not None:
            self._step.setdefault('rows', []).append(list(row))

    def doc_string(self, content: str) -> None:
        if self._step is not None:
            self._step['doc_string'] = content

    def after_step_result(self, *args: Any) -> None:
        self._step = None

    def after_feature_element(self, scenario: Any) -> None:
        self._scenario = None

    def after_feature(self, feature: Any) -> None:
        text = json.dumps(self.document, indent=2)
        if self.output_file:
            self.output_file.write_text(text + "\n")
        else:
            click.echo(text, file=self.io)

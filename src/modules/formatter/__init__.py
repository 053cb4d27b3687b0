"""Listeners that render a walk."""
from typing import Dict, Optional, TextIO, Type, Union

from .json import JsonFormatter
from .pretty import PrettyFormatter
from .summary import SummaryFormatter

Formatter = Union[PrettyFormatter, JsonFormatter, SummaryFormatter]

FORMATTERS: Dict[str, Type[Formatter]] = {
    "pretty": PrettyFormatter,
    "json": JsonFormatter,
    "summary": SummaryFormatter,
}


def create_formatter(name: str, output_file: Optional[str] = None, io: Optional[TextIO] = None) -> Formatter:
    """Create a formatter by name.

    Args:
        name: One of pretty, json or summary
        output_file: Report path, only used by the json formatter
        io: Stream to write to instead of stdout

    Raises:
        ValueError: If the formatter name is not supported
    """
    if name.lower() not in FORMATTERS:
        raise ValueError(f"Unsupported formatter: {name}. Must be one of: {', '.join(FORMATTERS.keys())}")

    if name.lower() == "json":
        return JsonFormatter(output_file, io)
    return FORMATTERS[name.lower()](io=io)

__all__ = ['FORMATTERS', 'JsonFormatter', 'PrettyFormatter', 'SummaryFormatter', 'create_formatter']

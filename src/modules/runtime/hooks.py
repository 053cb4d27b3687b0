from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class Hook:
    """A setup or teardown callable run around each scenario."""
    name: str
    handler: Callable[[Any], Any]
    order: int = 0

    def run(self, scenario: Any) -> Any:
        return self.handler(scenario)

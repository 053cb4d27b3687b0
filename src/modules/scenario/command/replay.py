import sys
from typing import List, Optional, TextIO

from ...formatter import SummaryFormatter, create_formatter
from ...logging import BaseLogger
from ...runtime import Runtime
from ...walker import TreeWalker, WalkerConfig
from ..loader import build_feature
from ..validator import ScenarioYamlValidator

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


class ReplayCommand:
    """Command class for replaying recorded scenario results through formatters."""
    
    def __init__(self, logger: BaseLogger, config: WalkerConfig):
        """
        Initialize the replay command.
        
        Args:
            logger: Logger instance
            config: Walker settings for this run
        """
        self.logger = logger
        self.config = config
        
    def _read_content(self, scenario_file: Optional[TextIO]) -> str:
        """Read scenario results from file or stdin."""
        if scenario_file is None:
            if sys.stdin.isatty():
                raise ValueError("Please provide a scenario file or pipe YAML content")
            return sys.stdin.read()
        return scenario_file.read()

    def run(self, scenario_file: Optional[TextIO], formats: List[str], out: Optional[str] = None) -> int:
        """
        Walk the recorded feature and report it through the chosen formatters.

        Args:
            scenario_file: File containing the scenario results YAML
            formats: Formatter names, notified in this order
            out: Output path for the json formatter

        Returns:
            The process exit code
        """
        try:
            content = self._read_content(scenario_file)
            feature = build_feature(ScenarioYamlValidator.validate_and_load(content))
            listeners = [create_formatter(name, out) for name in formats]
        except ValueError as err:
            self.logger.log_error(f"Scenario file error: {str(err)}")
            return EXIT_INVALID

        summary = next((l for l in listeners if isinstance(l, SummaryFormatter)), None)
        if summary is None:
            summary = SummaryFormatter(quiet=True)
            listeners.append(summary)

        self.logger.log_info(f"Replaying feature: {feature.name} ({len(feature.scenarios)} scenarios)")
        if self.config.dry_run:
            self.logger.log_info("Dry run: steps are reported without being invoked")

        walker = TreeWalker(Runtime(self.logger), listeners, self.config, self.logger)
        try:
            feature.accept(walker)
        except Exception as err:
            self.logger.log_error(f"Unexpected error during replay: {str(err)}")
            raise

        if summary.failed(self.config.strict):
            return EXIT_FAILED
        return EXIT_OK

"""Builds the step tree from a validated scenario file."""
from typing import Optional

from .config import FeatureConfig, ScenarioConfig, StepConfig
from .errors import ReplayedStepError
from .model import DocString, Embedding, Feature, Location, Scenario, Step, StepMatch, Table

STEP_INDENT = 4


def _location(text: Optional[str]) -> Optional[Location]:
    return Location.parse(text) if text else None


def build_step(config: StepConfig) -> Step:
    multiline_arg = None
    if config.table is not None:
        multiline_arg = Table(config.table)
    elif config.doc_string is not None:
        multiline_arg = DocString(config.doc_string)

    exception = ReplayedStepError(config.error, config.error_type) if config.error else None

    return Step(
        keyword=config.keyword,
        name=config.name,
        step_match=StepMatch(config.name),
        multiline_arg=multiline_arg,
        status=config.status,
        exception=exception,
        source_indent=STEP_INDENT,
        background=config.background,
        location=_location(config.location),
        messages=list(config.output),
        embeddings=[Embedding(e.file, e.mime_type, e.label) for e in config.embed]
    )


def build_scenario(config: ScenarioConfig) -> Scenario:
    return Scenario(
        name=config.name,
        steps=[build_step(step) for step in config.steps],
        keyword=config.keyword,
        location=_location(config.location),
        skip_hooks=config.skip_hooks
    )


def build_feature(config: FeatureConfig) -> Feature:
    return Feature(
        name=config.feature,
        scenarios=[build_scenario(scenario) for scenario in config.scenarios],
        keyword=config.keyword
    )

from .errors import ReplayedStepError
from .loader import build_feature
from .model import (
    DocString, Embedding, Feature, Location, Scenario,
    Step, StepCollection, StepMatch, StepStatus, Table
)
from .validator import ScenarioYamlValidator

__all__ = [
    'DocString',
    'Embedding',
    'Feature',
    'Location',
    'ReplayedStepError',
    'Scenario',
    'ScenarioYamlValidator',
    'Step',
    'StepCollection',
    'StepMatch',
    'StepStatus',
    'Table',
    'build_feature'
]

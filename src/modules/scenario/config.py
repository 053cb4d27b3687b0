from typing import List, Optional
from pydantic import BaseModel, field_validator, model_validator

from .model import Location, StepStatus


class EmbeddingConfig(BaseModel):
    file: str
    mime_type: str
    label: str = ""


class StepConfig(BaseModel):
    keyword: str = "Given"
    name: str
    status: Optional[StepStatus] = None  # left to the runtime when missing
    error: Optional[str] = None  # failure message, required iff status is failed
    error_type: str = "Error"
    location: Optional[str] = None  # file:line
    background: bool = False
    table: Optional[List[List[str]]] = None
    doc_string: Optional[str] = None
    output: List[str] = []
    embed: List[EmbeddingConfig] = []

    @field_validator('table', mode='before')
    @classmethod
    def stringify_cells(cls, rows):
        if rows is None:
            return rows
        return [[str(cell) for cell in row] for row in rows]

    @field_validator('location')
    @classmethod
    def validate_location(cls, location: Optional[str]) -> Optional[str]:
        if location is not None:
            Location.parse(location)
        return location

    @model_validator(mode='after')
    def validate_multiline_arg(self) -> 'StepConfig':
        """Validate that only one multiline argument is specified."""
        if self.table is not None and self.doc_string is not None:
            raise ValueError("Cannot specify both 'table' and 'doc_string' in the same step")
        return self

    @model_validator(mode='after')
    def validate_error(self) -> 'StepConfig':
        if self.status == StepStatus.FAILED and not self.error:
            raise ValueError("'error' is required when status is 'failed'")
        if self.error and self.status != StepStatus.FAILED:
            raise ValueError("'error' is only allowed when status is 'failed'")
        return self


class ScenarioConfig(BaseModel):
    name: str
    keyword: str = "Scenario"
    location: Optional[str] = None
    skip_hooks: bool = False
    steps: List[StepConfig]

    @field_validator('location')
    @classmethod
    def validate_location(cls, location: Optional[str]) -> Optional[str]:
        if location is not None:
            Location.parse(location)
        return location


class FeatureConfig(BaseModel):
    feature: str
    keyword: str = "Feature"
    scenarios: List[ScenarioConfig]

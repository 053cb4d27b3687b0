from typing import List
from pydantic import ValidationError
from pydantic_core import ErrorDetails
import yaml
from .config import FeatureConfig

def _build_validation_error_message(errors: List[ErrorDetails]) -> str:
    """Build a ValueError message from a list of Pydantic validation errors."""
    messages = []
    for error in errors:
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        msg = error['msg']
        messages.append(f"Error in field '{field_path}': {msg}")

    return "\n".join(messages)

class ScenarioYamlValidator:
    """Validates YAML scenario result files and creates FeatureConfig instances."""

    @classmethod
    def validate_and_load(cls, yaml_content: str) -> FeatureConfig:
        """
        Validate YAML content and create a FeatureConfig instance.
        
        Args:
            yaml_content: The YAML content to validate
            
        Returns:
            FeatureConfig: The validated feature description
            
        Raises:
            ValueError: If the YAML content is invalid
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {str(e)}")

        if not isinstance(data, dict):
            raise ValueError("Invalid scenario file: expected a mapping at the top level")

        try:
            return FeatureConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(_build_validation_error_message(e.errors()))

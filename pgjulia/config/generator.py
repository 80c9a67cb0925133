"""Generator configuration management."""
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class GeneratorConfigError(ValueError):
    """Raised when generator configuration loading fails."""


class GeneratorConfig(BaseModel):
    """Static settings that shape the generated modules."""

    extension: str = "jl"
    fallback_type: str = "Any"
    type_overrides: Dict[str, str] = Field(default_factory=dict)

    @field_validator('extension')
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value or '.' in value or '/' in value or '\\' in value:
            raise ValueError(
                f"extension must be a bare suffix without dots or separators, got '{value}'"
            )
        return value

    @field_validator('fallback_type')
    @classmethod
    def _check_fallback(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("fallback_type must not be empty")
        return value


def default_config_path() -> Path:
    """Location of the per-user generator config file."""
    return Path.home() / '.pgjulia' / 'config.yaml'


def load_generator_config(config_file: Optional[str] = None) -> GeneratorConfig:
    """Load generator configuration.

    Loads configuration with the following priority:
    1. Explicit --config path (highest priority)
    2. ~/.pgjulia/config.yaml
    3. Built-in defaults

    Args:
        config_file: Optional explicit config file path

    Returns:
        Validated GeneratorConfig

    Raises:
        GeneratorConfigError: If the file is missing, malformed or holds invalid values
    """
    if config_file:
        config = _build_config(_load_yaml_config(config_file), config_file)
        logger.info("Loaded generator config from: %s", config_file)
        return config

    default_path = default_config_path()
    if default_path.exists():
        config = _build_config(_load_yaml_config(str(default_path)), str(default_path))
        logger.info("Loaded generator config from: %s", default_path)
        return config

    logger.debug("No generator config found, using defaults")
    return GeneratorConfig()


def _build_config(data: Dict, source: str) -> GeneratorConfig:
    try:
        return GeneratorConfig(**data)
    except ValidationError as e:
        raise GeneratorConfigError(
            f"Invalid generator configuration: {source}\n{e}"
        ) from e


def _load_yaml_config(file_path: str) -> Dict:
    """Load YAML configuration file.

    Args:
        file_path: Path to YAML config file

    Returns:
        Parsed configuration dictionary (empty for an empty file)

    Raises:
        GeneratorConfigError: If file is invalid or missing
    """
    try:
        if not os.path.exists(file_path):
            raise GeneratorConfigError(f"Configuration file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        if config is None:
            return {}

        if not isinstance(config, dict):
            raise GeneratorConfigError(
                f"Configuration file must contain a YAML dictionary: {file_path}"
            )

        return config

    except yaml.YAMLError as e:
        raise GeneratorConfigError(
            f"Invalid YAML configuration: {file_path}\n{e}"
        ) from e
    except OSError as e:
        raise GeneratorConfigError(
            f"Error reading configuration file: {file_path}\n{e}"
        ) from e

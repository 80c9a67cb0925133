"""Configuration management."""
from pgjulia.config.generator import (
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)
from pgjulia.config.options import GenerationOptions, resolve_url

__all__ = [
    'GenerationOptions',
    'GeneratorConfig',
    'GeneratorConfigError',
    'load_generator_config',
    'resolve_url',
]

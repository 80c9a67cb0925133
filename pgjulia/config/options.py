"""Run options for a single generation pass."""
import os
from typing import Optional

from pydantic import BaseModel

URL_ENV_VAR = 'PGJULIA_URL'


class GenerationOptions(BaseModel):
    """Everything one invocation needs, built once and passed through the pipeline."""

    output_dir: str = "."
    api_file: Optional[str] = None  # accepted, not used for model generation
    url: str = ""
    schema_name: str = "public"
    config_file: Optional[str] = None


def resolve_url(url: Optional[str]) -> str:
    """Return the explicit URL, falling back to the PGJULIA_URL environment variable."""
    if url:
        return url
    return os.getenv(URL_ENV_VAR, "")

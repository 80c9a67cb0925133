"""Normalized column type to Julia type mapping."""
from typing import Dict, Optional

FALLBACK_TYPE = "Any"

JULIA_TYPES: Dict[str, str] = {
    'int': 'Int64',
    'int64': 'Int64',
    'float64': 'Float64',
    'string': 'String',
}


def map_type(
    source_type: str,
    overrides: Optional[Dict[str, str]] = None,
    fallback: str = FALLBACK_TYPE
) -> str:
    """Return the Julia type for a normalized column type label.

    Unrecognized labels map to the fallback type; this never raises.
    """
    if overrides and source_type in overrides:
        return overrides[source_type]
    return JULIA_TYPES.get(source_type, fallback)

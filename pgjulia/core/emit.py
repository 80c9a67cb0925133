"""Julia module rendering for introspected tables."""
from typing import Dict, Optional

from pgjulia.core.types import FALLBACK_TYPE, map_type
from pgjulia.models.schema import TableSchema

def emit_module(
    table: TableSchema,
    overrides: Optional[Dict[str, str]] = None,
    fallback: str = FALLBACK_TYPE
) -> str:
    """Render a table as a Julia module with one const per column."""
    lines = [f"module {table.table_name}", ""]

    for column in table.columns:
        julia_type = map_type(column.data_type, overrides, fallback)
        lines.append(f"const {column.column_name}::{julia_type}")

    lines.extend(["", "end", ""])
    return "\n".join(lines)

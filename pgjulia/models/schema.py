from typing import List, Optional

from pydantic import BaseModel, ConfigDict

class ColumnSchema(BaseModel):
    """Represents a single column of an introspected table."""

    model_config = ConfigDict(frozen=True)

    column_name: str
    data_type: str
    db_type: Optional[str] = None
    is_nullable: bool = True
    is_primary_key: bool = False
    ordinal_position: int = 0
    comment: Optional[str] = None

class TableSchema(BaseModel):
    """Represents a table and its ordered columns."""

    model_config = ConfigDict(frozen=True)

    schema_name: str
    table_name: str
    columns: List[ColumnSchema]

class GeneratedFile(BaseModel):
    """Rendered module text paired with the filename it will be written to."""

    filename: str
    content: str

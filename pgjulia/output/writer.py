"""Writing rendered modules to disk."""
import logging
from pathlib import Path
from typing import Union

from pgjulia.models.schema import GeneratedFile, TableSchema

logger = logging.getLogger(__name__)

def module_filename(table: TableSchema, extension: str = "jl") -> str:
    """Return the output filename for a table: <table_name>.<extension>."""
    return f"{table.table_name}.{extension}"

def write_module(
    output_dir: Union[str, Path],
    table: TableSchema,
    content: str,
    extension: str = "jl"
) -> Path:
    """Write module text to <output_dir>/<table_name>.<extension>.

    Existing files are overwritten. OSError propagates if the directory is
    missing or not writable.
    """
    return write_file(
        output_dir,
        GeneratedFile(filename=module_filename(table, extension), content=content)
    )

def write_file(output_dir: Union[str, Path], generated: GeneratedFile) -> Path:
    """Write a GeneratedFile into output_dir and return its path."""
    path = Path(output_dir) / generated.filename
    with open(path, 'w', encoding='utf-8') as f:
        f.write(generated.content)
    logger.info("Wrote %s", path)
    return path

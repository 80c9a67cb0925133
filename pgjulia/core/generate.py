"""Schema-to-Julia generation pipeline."""
import logging
import os
from pathlib import Path
from typing import List, Optional

from pgjulia.config.generator import load_generator_config
from pgjulia.config.options import GenerationOptions
from pgjulia.core.emit import emit_module
from pgjulia.models.schema import TableSchema
from pgjulia.output.writer import write_module
from pgjulia.reader import SchemaReader, get_reader

logger = logging.getLogger(__name__)


class NoTablesMatchedError(LookupError):
    """Raised when the requested schema contains no tables."""

    def __init__(self, message: str = "no tables matched"):
        super().__init__(message)


class DuplicateTableError(ValueError):
    """Raised when the reader lists the same table name twice."""


class InvalidTableNameError(ValueError):
    """Raised when a table name cannot be used as a filename in the output directory."""


def generate(
    options: GenerationOptions,
    reader: Optional[SchemaReader] = None
) -> List[Path]:
    """Generate one Julia module file per table in options.schema_name.

    Steps run strictly in order and the first error aborts the run:
    1. Create the output directory (before any database work)
    2. Load the generator configuration
    3. Connect the schema reader
    4. Read every table of the schema
    5. Render and write each table in reader order

    Args:
        options: Run options
        reader: Optional pre-built reader; defaults to a PostgreSQL reader

    Returns:
        Paths of the written files, in table order

    Raises:
        NoTablesMatchedError: If the schema holds no tables
        DuplicateTableError: If the reader listed a table twice
        InvalidTableNameError: If a table name would escape the output directory
        GeneratorConfigError: If the generator config is invalid
        OSError: If the directory cannot be created or a file cannot be written
    """
    os.makedirs(options.output_dir, exist_ok=True)

    config = load_generator_config(options.config_file)

    if reader is None:
        reader = get_reader('postgres')

    with reader:
        reader.connect(options.url)
        tables = read_tables(reader, options.schema_name)

    if not tables:
        raise NoTablesMatchedError()

    written = []
    for table in tables:
        content = emit_module(
            table,
            overrides=config.type_overrides,
            fallback=config.fallback_type
        )
        written.append(
            write_module(options.output_dir, table, content, extension=config.extension)
        )

    logger.info("Generated %d modules in %s", len(written), options.output_dir)
    return written


def read_tables(reader: SchemaReader, schema: str) -> List[TableSchema]:
    """Fetch every table of a schema, keeping the reader's listing order."""
    names = reader.list_tables(schema)
    for name in names:
        check_table_name(name)

    seen = set()
    tables = []
    for name in names:
        if name in seen:
            raise DuplicateTableError(f"table listed twice in schema {schema}: {name}")
        seen.add(name)
        tables.append(reader.fetch_table(schema, name))

    return tables


def check_table_name(name: str) -> None:
    """Reject names that would nest or escape when used as <name>.<ext>."""
    if name in ('.', '..') or any(ch in name for ch in ('/', '\\', '\0')):
        raise InvalidTableNameError(
            f"table name cannot be used as a filename: {name!r}"
        )

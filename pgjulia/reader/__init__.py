"""Schema reader registry and factory."""
import logging
from typing import Dict, Type

from pgjulia.reader.base import ReaderNotConnectedError, SchemaReader
from pgjulia.reader.postgres import PostgresReader

logger = logging.getLogger(__name__)


class UnsupportedDatabaseError(ValueError):
    """Raised when an unsupported database type is requested."""


# Registry of available schema readers
# Format: database_type -> reader class
SCHEMA_READERS: Dict[str, Type[SchemaReader]] = {
    'postgres': PostgresReader,
}


def get_reader(database_type: str) -> SchemaReader:
    """Get a schema reader instance by type.

    Args:
        database_type: Type of database (postgres)

    Returns:
        SchemaReader instance for the specified database

    Raises:
        UnsupportedDatabaseError: If database type is not recognized
    """
    database_type_lower = database_type.lower()

    if database_type_lower not in SCHEMA_READERS:
        raise UnsupportedDatabaseError(
            f"Unsupported database: '{database_type}'. "
            f"Supported types: {', '.join(SCHEMA_READERS.keys())}"
        )

    logger.debug("Creating reader for database type: %s", database_type_lower)
    return SCHEMA_READERS[database_type_lower]()


def list_supported_databases() -> list[str]:
    """Get list of supported database types."""
    return list(SCHEMA_READERS.keys())


__all__ = [
    'ReaderNotConnectedError',
    'SchemaReader',
    'UnsupportedDatabaseError',
    'get_reader',
    'list_supported_databases',
]

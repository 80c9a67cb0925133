"""PostgreSQL schema reader implementation."""
import logging
from typing import Dict, List, Optional

import psycopg2

from pgjulia.models.schema import ColumnSchema, TableSchema
from pgjulia.reader.base import ReaderNotConnectedError, SchemaReader

logger = logging.getLogger(__name__)

# udt_name -> normalized label consumed by the type mapper
PG_TYPE_LABELS: Dict[str, str] = {
    'int2': 'int64',
    'int4': 'int64',
    'int8': 'int64',
    'smallint': 'int64',
    'integer': 'int64',
    'bigint': 'int64',
    'smallserial': 'int64',
    'serial': 'int64',
    'serial2': 'int64',
    'serial4': 'int64',
    'serial8': 'int64',
    'bigserial': 'int64',
    'oid': 'int64',
    'float4': 'float64',
    'float8': 'float64',
    'real': 'float64',
    'double precision': 'float64',
    'numeric': 'float64',
    'decimal': 'float64',
    'money': 'float64',
    'bpchar': 'string',
    'char': 'string',
    'varchar': 'string',
    'character varying': 'string',
    'text': 'string',
    'citext': 'string',
    'name': 'string',
    'uuid': 'string',
    'json': 'string',
    'jsonb': 'string',
    'xml': 'string',
    'inet': 'string',
    'cidr': 'string',
    'macaddr': 'string',
    'bool': 'bool',
    'boolean': 'bool',
    'date': 'time',
    'time': 'time',
    'timetz': 'time',
    'timestamp': 'time',
    'timestamptz': 'time',
    'interval': 'time',
    'bytea': 'bytes',
}

LIST_TABLES_QUERY = """
SELECT table_name
FROM information_schema.tables
WHERE table_schema = %s
  AND table_type = 'BASE TABLE'
ORDER BY table_name
"""

COLUMNS_QUERY = """
SELECT
    c.column_name,
    c.udt_name,
    c.is_nullable,
    c.ordinal_position,
    pg_catalog.col_description(
        (quote_ident(c.table_schema) || '.' || quote_ident(c.table_name))::regclass,
        c.ordinal_position
    )
FROM information_schema.columns c
WHERE c.table_schema = %s
  AND c.table_name = %s
ORDER BY c.ordinal_position
"""

PRIMARY_KEY_QUERY = """
SELECT kcu.column_name
FROM information_schema.table_constraints tc
JOIN information_schema.key_column_usage kcu
  ON tc.constraint_name = kcu.constraint_name
 AND tc.table_schema = kcu.table_schema
 AND tc.table_name = kcu.table_name
WHERE tc.constraint_type = 'PRIMARY KEY'
  AND tc.table_schema = %s
  AND tc.table_name = %s
"""


def normalize_type(udt_name: str) -> str:
    """Map a PostgreSQL type name to a normalized label.

    Unknown types (arrays, enums, domains, ...) are returned unchanged.
    """
    return PG_TYPE_LABELS.get(udt_name.lower(), udt_name)


class PostgresReader(SchemaReader):
    """PostgreSQL schema reader backed by psycopg2."""

    def __init__(self):
        """Initialize PostgreSQL reader."""
        self.url: Optional[str] = None
        self.conn = None

    def connect(self, url: str) -> None:
        """Remember the connection string; the connection opens on first query.

        Args:
            url: libpq connection string or postgresql:// URI
        """
        self.url = url
        logger.debug("PostgreSQL reader configured")

    def _connection(self):
        if self.conn is not None:
            return self.conn
        if self.url is None:
            raise ReaderNotConnectedError(
                "Not connected to PostgreSQL. Call connect() first."
            )
        try:
            self.conn = psycopg2.connect(self.url)
            logger.info("Successfully connected to PostgreSQL")
        except psycopg2.Error as e:
            logger.error("Failed to connect to PostgreSQL: %s", e)
            raise
        return self.conn

    def list_tables(self, schema: str) -> List[str]:
        """List base tables in a schema, ordered by name."""
        with self._connection().cursor() as cursor:
            cursor.execute(LIST_TABLES_QUERY, (schema,))
            tables = [row[0] for row in cursor.fetchall()]

        logger.info("Found %d tables in schema %s", len(tables), schema)
        return tables

    def fetch_table(self, schema: str, table: str) -> TableSchema:
        """Fetch ordered column metadata and primary key flags for one table."""
        conn = self._connection()

        with conn.cursor() as cursor:
            cursor.execute(PRIMARY_KEY_QUERY, (schema, table))
            primary_keys = {row[0] for row in cursor.fetchall()}

        with conn.cursor() as cursor:
            cursor.execute(COLUMNS_QUERY, (schema, table))
            rows = cursor.fetchall()

        columns = []
        for row in rows:
            col = ColumnSchema(
                column_name=row[0],
                data_type=normalize_type(row[1]),
                db_type=row[1],
                is_nullable=(row[2] == 'YES'),
                ordinal_position=row[3],
                is_primary_key=row[0] in primary_keys,
                comment=row[4],
            )
            logger.debug("Column %s.%s: %s -> %s", table, col.column_name, col.db_type, col.data_type)
            columns.append(col)

        logger.info("Fetched %d columns for %s.%s", len(columns), schema, table)
        return TableSchema(schema_name=schema, table_name=table, columns=columns)

    def close(self) -> None:
        """Close PostgreSQL connection."""
        if self.conn:
            try:
                self.conn.close()
                logger.info("Closed PostgreSQL connection")
            except psycopg2.Error as e:
                logger.warning("Error closing connection: %s", e)
            finally:
                self.conn = None

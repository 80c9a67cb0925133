"""Common test fixtures."""
# pylint: disable=redefined-outer-name
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from pgjulia.models.schema import ColumnSchema, TableSchema
from pgjulia.reader.base import SchemaReader


class FakeReader(SchemaReader):
    """In-memory reader that serves prepared tables and records calls."""

    def __init__(self, tables: Dict[str, TableSchema], fail_on: Optional[str] = None,
                 listing: Optional[List[str]] = None):
        self.tables = tables
        self.fail_on = fail_on
        self.listing = listing
        self.url = None
        self.fetched: List[str] = []
        self.closed = 0

    def connect(self, url):
        self.url = url

    def list_tables(self, schema):
        if self.listing is not None:
            return list(self.listing)
        return list(self.tables.keys())

    def fetch_table(self, schema, table):
        self.fetched.append(table)
        if table == self.fail_on:
            raise RuntimeError(f"query failed for {table}")
        return self.tables[table]

    def close(self):
        self.closed += 1


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep ~/.pgjulia and PGJULIA_URL from leaking into tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv("PGJULIA_URL", raising=False)
    return home

@pytest.fixture
def column_factory():
    """Factory to create ColumnSchema instances for testing."""
    def _make_column(
        column_name="id",
        data_type="int64",
        db_type=None,
        is_nullable=False,
        is_primary_key=False,
        ordinal_position=1
    ):
        return ColumnSchema(
            column_name=column_name,
            data_type=data_type,
            db_type=db_type,
            is_nullable=is_nullable,
            is_primary_key=is_primary_key,
            ordinal_position=ordinal_position
        )
    return _make_column

@pytest.fixture
def table_factory(column_factory):
    """Factory to create TableSchema instances from (name, type) pairs."""
    def _make_table(table_name="users", columns=None, schema_name="public"):
        if columns is None:
            columns = [("id", "int64")]
        return TableSchema(
            schema_name=schema_name,
            table_name=table_name,
            columns=[
                column_factory(column_name=name, data_type=dtype, ordinal_position=i)
                for i, (name, dtype) in enumerate(columns, start=1)
            ]
        )
    return _make_table

@pytest.fixture
def sample_tables(table_factory):
    """users and orders tables keyed by name, in listing order."""
    return {
        "users": table_factory("users", [("id", "int"), ("name", "string")]),
        "orders": table_factory("orders", [("id", "int64"), ("total", "float64")]),
    }

@pytest.fixture
def reader_factory():
    """Factory to create FakeReader instances."""
    def _make_reader(tables, fail_on=None, listing=None):
        return FakeReader(tables, fail_on=fail_on, listing=listing)
    return _make_reader

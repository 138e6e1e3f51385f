"""Pytest configuration and shared fixtures.

Database fixtures use an in-memory SQLite engine through SQLAlchemy, so the
statement binders run against a real driver with ``?`` positional markers.
"""

from __future__ import annotations

from typing import Generator

import pytest
import sqlalchemy as sa
from sqlalchemy.engine import Connection

from sql_metamodel.config import get_settings
from sql_metamodel.infrastructure.schema import ColumnType, DDLGenerator, Table
from sql_metamodel.infrastructure.sql.dialects import SQLiteTypeMapping


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Settings are cached process-wide; reset them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_connection() -> Generator[Connection, None, None]:
    """A connection to a private in-memory SQLite database."""
    engine = sa.create_engine("sqlite://")
    with engine.connect() as conn:
        yield conn
    engine.dispose()


@pytest.fixture
def person_table() -> Table:
    """Table Person(id primary key, name, age not null, active)."""
    table = Table("Person")
    table.add_column("id", ColumnType.LONG, primary_key=True)
    table.add_column("name", ColumnType.STRING)
    table.add_column("age", ColumnType.INT)
    table.add_column("active", ColumnType.BOOLEAN)
    return table


@pytest.fixture
def person_connection(
    sqlite_connection: Connection, person_table: Table
) -> Connection:
    """sqlite_connection with the Person table created from its DDL."""
    ddl = DDLGenerator(SQLiteTypeMapping()).generate_create_table(person_table)
    sqlite_connection.exec_driver_sql(ddl)
    return sqlite_connection

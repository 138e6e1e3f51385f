"""
Unit tests for DDL generation.

Column types come from the injected renderer, so these tests use a renderer
returning "type" for every column to pin the statement layout.
"""

from __future__ import annotations

import pytest

from sql_metamodel.infrastructure.schema import (
    ColumnType,
    DDLGenerator,
    ForeignKey,
    Index,
    Table,
)
from sql_metamodel.infrastructure.sql.dialects import TypeMapping


@pytest.fixture
def generator() -> DDLGenerator:
    return DDLGenerator(lambda column: "type")


@pytest.fixture
def toto() -> Table:
    return Table("Toto")


@pytest.mark.unit
class TestGenerateCreateTable:
    """Tests for create table statements."""

    def test_columns_rendered_incrementally(self, generator: DDLGenerator, toto: Table) -> None:
        toto.add_column("A", ColumnType.STRING)
        assert generator.generate_create_table(toto) == "create table Toto(A type)"

        toto.add_column("B", ColumnType.STRING)
        assert generator.generate_create_table(toto) == "create table Toto(A type, B type)"

        toto.add_column("C", ColumnType.STRING, primary_key=True)
        assert (
            generator.generate_create_table(toto)
            == "create table Toto(A type, B type, C type primary key)"
        )

        toto.add_column("D", ColumnType.INT)
        assert (
            generator.generate_create_table(toto)
            == "create table Toto(A type, B type, C type primary key, D type not null)"
        )

    def test_primitive_primary_key_renders_primary_key_only(
        self, generator: DDLGenerator, toto: Table
    ) -> None:
        toto.add_column("id", ColumnType.LONG, primary_key=True)
        assert generator.generate_create_table(toto) == "create table Toto(id type primary key)"

    def test_prefix_stability(self, generator: DDLGenerator, toto: Table) -> None:
        toto.add_column("A")
        toto.add_column("B", ColumnType.BOOL)
        before = generator.generate_create_table(toto)
        toto.add_column("C")
        after = generator.generate_create_table(toto)
        assert after.startswith(before[:-1] + ", ")

    def test_output_is_deterministic(self, generator: DDLGenerator, toto: Table) -> None:
        toto.add_column("A")
        assert generator.generate_create_table(toto) == generator.generate_create_table(toto)

    def test_schema_qualified_table(self, generator: DDLGenerator) -> None:
        table = Table("users", schema="app")
        table.add_column("name")
        assert generator.generate_create_table(table) == "create table app.users(name type)"

    def test_renderer_called_once_per_column(self, toto: Table) -> None:
        calls = []

        def renderer(column):
            calls.append(column.name)
            return column.column_type.value

        toto.add_column("A", ColumnType.STRING)
        toto.add_column("B", ColumnType.INTEGER)
        sql = DDLGenerator(renderer).generate_create_table(toto)
        assert sql == "create table Toto(A string, B integer)"
        assert calls == ["A", "B"]

    def test_type_mapping_object_as_renderer(self, toto: Table) -> None:
        toto.add_column("A", ColumnType.STRING)
        toto.add_column("B", ColumnType.INT)
        generator = DDLGenerator(TypeMapping({ColumnType.STRING: "varchar(32)"}))
        assert (
            generator.generate_create_table(toto)
            == "create table Toto(A varchar(32), B integer not null)"
        )

    def test_invalid_renderer_rejected(self) -> None:
        with pytest.raises(TypeError):
            DDLGenerator("type")


@pytest.mark.unit
class TestGenerateCreateIndex:
    """Tests for create index statements."""

    def test_single_and_multi_column(self, generator: DDLGenerator, toto: Table) -> None:
        col_a = toto.add_column("A")
        col_b = toto.add_column("B")

        assert generator.generate_create_index(Index(col_a, "Idx1")) == "create index Idx1 on Toto(A)"
        assert (
            generator.generate_create_index(Index([col_a, col_b], "Idx2"))
            == "create index Idx2 on Toto(A, B)"
        )

    def test_index_column_order_kept(self, generator: DDLGenerator, toto: Table) -> None:
        col_a = toto.add_column("A")
        col_b = toto.add_column("B")
        assert (
            generator.generate_create_index(Index([col_b, col_a], "Idx"))
            == "create index Idx on Toto(B, A)"
        )


@pytest.mark.unit
class TestGenerateCreateForeignKey:
    """Tests for foreign key constraints."""

    @pytest.fixture
    def titi(self) -> Table:
        return Table("Titi")

    def test_single_and_multi_column(self, generator: DDLGenerator, toto: Table, titi: Table) -> None:
        col_a = toto.add_column("A")
        col_b = toto.add_column("B")
        col_a2 = titi.add_column("A")
        col_b2 = titi.add_column("B")

        foreign_key = ForeignKey(col_a, "FK1", col_a2)
        assert (
            generator.generate_create_foreign_key(foreign_key)
            == "alter table Titi add constraint FK1 foreign key(A) references Titi(A)"
        )

        foreign_key = ForeignKey([col_a, col_b], "FK1", [col_a2, col_b2])
        assert (
            generator.generate_create_foreign_key(foreign_key)
            == "alter table Titi add constraint FK1 foreign key(A, B) references Titi(A, B)"
        )

    def test_column_names_follow_pairing(self, generator: DDLGenerator, toto: Table, titi: Table) -> None:
        owner_id = toto.add_column("owner_id")
        key = titi.add_column("id", primary_key=True)
        sql = generator.generate_create_foreign_key(ForeignKey(owner_id, "fk_owner", key))
        assert sql.endswith("foreign key(owner_id) references Titi(id)")


@pytest.mark.unit
class TestGenerateSchema:
    """Tests for whole-schema scripts and drop statements."""

    def test_statement_order(self, generator: DDLGenerator, toto: Table) -> None:
        titi = Table("Titi")
        col_a = toto.add_column("A")
        key = titi.add_column("A", primary_key=True)
        index = Index(col_a, "Idx1")
        fk = ForeignKey(col_a, "FK1", key)

        sqls = generator.generate_schema([toto, titi], [index], [fk])

        assert sqls == [
            "create table Toto(A type)",
            "create table Titi(A type primary key)",
            "create index Idx1 on Toto(A)",
            "alter table Titi add constraint FK1 foreign key(A) references Titi(A)",
        ]

    def test_drop_statements(self, generator: DDLGenerator, toto: Table) -> None:
        titi = Table("Titi")
        col_a = toto.add_column("A")
        key = titi.add_column("A")
        assert generator.generate_drop_table(toto) == "drop table Toto"
        assert generator.generate_drop_index(Index(col_a, "Idx1")) == "drop index Idx1"
        assert (
            generator.generate_drop_foreign_key(ForeignKey(col_a, "FK1", key))
            == "alter table Titi drop constraint FK1"
        )

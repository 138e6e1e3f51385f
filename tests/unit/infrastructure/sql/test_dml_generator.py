"""
Tests for DML statement builders.
"""

from __future__ import annotations

import pytest

from sql_metamodel.exceptions import ConfigurationError
from sql_metamodel.infrastructure.mapping import PersistentValues
from sql_metamodel.infrastructure.schema import ColumnType, Table
from sql_metamodel.infrastructure.sql.dml_generator import DMLGenerator


@pytest.fixture
def generator() -> DMLGenerator:
    return DMLGenerator()


@pytest.fixture
def toto() -> Table:
    table = Table("Toto")
    table.add_column("A", ColumnType.INT, primary_key=True)
    table.add_column("B")
    table.add_column("C")
    return table


@pytest.mark.unit
class TestStatements:
    """Generated SQL and positions."""

    def test_insert(self, generator: DMLGenerator, toto: Table) -> None:
        insert = generator.build_insert(toto)
        a, b, c = toto.columns
        assert insert.sql == "insert into Toto(A, B, C) values (?, ?, ?)"
        assert insert.insert_indexes == {a: (1,), b: (2,), c: (3,)}

    def test_update(self, generator: DMLGenerator, toto: Table) -> None:
        a, b, c = toto.columns
        update = generator.build_update([b, c], where=[a])
        assert update.sql == "update Toto set B = ?, C = ? where A = ?"
        assert update.update_indexes == {b: (1,), c: (2,)}
        assert update.where_indexes == {a: (3,)}

    def test_update_column_in_set_and_where(self, generator: DMLGenerator, toto: Table) -> None:
        a, b, _ = toto.columns
        update = generator.build_update([b], where=[b, a])
        assert update.sql == "update Toto set B = ? where B = ? and A = ?"
        update.set_value(b, "new")
        update.set_where_value(b, "old")
        update.set_where_value(a, 1)
        assert update.parameters == ("new", "old", 1)

    def test_delete(self, generator: DMLGenerator, toto: Table) -> None:
        a = toto.get_column("A")
        assert generator.build_delete(toto, [a]).sql == "delete from Toto where A = ?"
        assert generator.build_delete(toto, []).sql == "delete from Toto"

    def test_select(self, generator: DMLGenerator, toto: Table) -> None:
        a, b, c = toto.columns
        assert generator.build_select(toto).sql == "select A, B, C from Toto"
        select = generator.build_select(toto, [c], where=[a, b])
        assert select.sql == "select C from Toto where A = ? and B = ?"
        assert select.where_indexes == {a: (1,), b: (2,)}

    def test_columns_of_other_table_rejected(self, generator: DMLGenerator, toto: Table) -> None:
        titi = Table("Titi")
        other = titi.add_column("X")
        with pytest.raises(ConfigurationError):
            generator.build_insert([toto.get_column("A"), other])
        with pytest.raises(ConfigurationError):
            generator.build_select(toto, where=[other])
        with pytest.raises(ConfigurationError):
            generator.build_delete(toto, [other])

    def test_insert_without_columns_rejected(self, generator: DMLGenerator) -> None:
        with pytest.raises(ConfigurationError):
            generator.build_insert([])

    def test_update_without_set_columns_rejected(self, generator: DMLGenerator, toto: Table) -> None:
        with pytest.raises(ConfigurationError, match="without columns to set"):
            generator.build_update([], where=[toto.get_column("A")])


@pytest.mark.integration
class TestRoundTrip:
    """Generated statements run on SQLite."""

    def test_crud_cycle(self, generator: DMLGenerator, person_connection, person_table: Table) -> None:
        id_, name, age, active = person_table.columns

        insert = generator.build_insert(person_table).prepare(person_connection)
        for i, person_name in enumerate(["ann", "bob"], 1):
            insert.apply_values(
                PersistentValues(
                    upsert_values={id_: i, name: person_name, age: 20 + i, active: i % 2 == 0}
                )
            )
            assert insert.execute() == 1

        update = generator.build_update([age], where=[name]).prepare(person_connection)
        update.apply_values(PersistentValues(where_values={name: "ann"}, upsert_values={age: 50}))
        assert update.execute() == 1

        select = generator.build_select(person_table, where=[age]).prepare(person_connection)
        select.apply_values(PersistentValues(where_values={age: 50}))
        rows = [row.as_dict() for row in select.execute()]
        assert rows == [{"id": 1, "name": "ann", "age": 50, "active": False}]

        delete = generator.build_delete(person_table, [id_]).prepare(person_connection)
        delete.apply_values(PersistentValues(where_values={id_: 2}))
        assert delete.execute() == 1

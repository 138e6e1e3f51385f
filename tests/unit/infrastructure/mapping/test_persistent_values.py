"""
Unit tests for PersistentValues.
"""

import pytest

from sql_metamodel.infrastructure.mapping import PersistentValues
from sql_metamodel.infrastructure.schema import Table


@pytest.fixture
def columns():
    table = Table("Toto")
    return table.add_column("A"), table.add_column("B")


@pytest.mark.unit
class TestPersistentValues:
    def test_bags_start_empty(self):
        values = PersistentValues()
        assert values.where_values == {}
        assert values.upsert_values == {}

    def test_put_is_chainable(self, columns):
        a, b = columns
        values = PersistentValues().put_where_value(a, 1).put_upsert_value(b, "x")
        assert values.where_values == {a: 1}
        assert values.upsert_values == {b: "x"}

    def test_none_is_kept_as_a_bound_null(self, columns):
        a, _ = columns
        values = PersistentValues(where_values={a: None})
        assert a in values.where_values
        assert values.where_values[a] is None

    def test_constructor_copies_mappings(self, columns):
        a, _ = columns
        source = {a: 1}
        values = PersistentValues(upsert_values=source)
        source[a] = 2
        assert values.upsert_values[a] == 1

    def test_clear(self, columns):
        a, b = columns
        values = PersistentValues({a: 1}, {b: 2})
        values.clear()
        assert values.where_values == {} and values.upsert_values == {}

    def test_repr_uses_column_names(self, columns):
        a, _ = columns
        assert "Toto.A" in repr(PersistentValues({a: 1}))

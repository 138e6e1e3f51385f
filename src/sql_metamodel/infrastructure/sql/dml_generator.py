"""
DML statement builders.

Produces binders ready to receive values: the SQL text with ``?`` markers and
the position of every column in it. Identifiers are emitted verbatim.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from sql_metamodel.exceptions import ConfigurationError

from ..schema.core import Column, Table
from .core.parameters import PLACEHOLDER, build_positions
from .operations import DeleteOperation, InsertOperation, SelectOperation, UpdateOperation


def _as_columns(columns: Union[Table, Iterable[Column]]) -> List[Column]:
    if isinstance(columns, Table):
        return list(columns.columns)
    return list(columns)


def _owning_table(columns: Sequence[Column], statement: str) -> str:
    if not columns:
        raise ConfigurationError(f"Cannot build {statement} statement without columns")
    owners = {c.table_name for c in columns}
    if len(owners) > 1:
        raise ConfigurationError(
            f"Columns of {statement} statement belong to several tables: {sorted(owners)}"
        )
    return columns[0].table_name


def _predicate(columns: Sequence[Column]) -> str:
    return " and ".join(f"{c.name} = {PLACEHOLDER}" for c in columns)


class DMLGenerator:
    """
    Builds select/insert/update/delete binders from the schema graph.

    Example:
        >>> table = Table("Toto")
        >>> a, b = table.add_column("A"), table.add_column("B")
        >>> DMLGenerator().build_insert(table).sql
        'insert into Toto(A, B) values (?, ?)'
    """

    def build_insert(self, columns: Union[Table, Iterable[Column]]) -> InsertOperation:
        cols = _as_columns(columns)
        table = _owning_table(cols, "insert")
        names = ", ".join(c.name for c in cols)
        markers = ", ".join(PLACEHOLDER for _ in cols)
        sql = f"insert into {table}({names}) values ({markers})"
        return InsertOperation(sql, build_positions(cols))

    def build_update(
        self,
        columns: Union[Table, Iterable[Column]],
        where: Iterable[Column],
    ) -> UpdateOperation:
        """Update ``columns`` of the rows matching equality on ``where`` columns.

        A column may be both updated and used in the predicate.
        """
        cols = _as_columns(columns)
        where_cols = list(where)
        if not cols:
            raise ConfigurationError("Cannot build update statement without columns to set")
        table = _owning_table(cols + where_cols, "update")
        assignments = ", ".join(f"{c.name} = {PLACEHOLDER}" for c in cols)
        sql = f"update {table} set {assignments}"
        if where_cols:
            sql += f" where {_predicate(where_cols)}"
        return UpdateOperation(
            sql,
            build_positions(cols),
            build_positions(where_cols, start=len(cols) + 1),
        )

    def build_delete(self, table: Table, where: Iterable[Column]) -> DeleteOperation:
        where_cols = list(where)
        sql = f"delete from {table.absolute_name}"
        if where_cols:
            _check_owner(table, where_cols, "delete")
            sql += f" where {_predicate(where_cols)}"
        return DeleteOperation(sql, build_positions(where_cols))

    def build_select(
        self,
        table: Table,
        columns: Optional[Iterable[Column]] = None,
        where: Iterable[Column] = (),
    ) -> SelectOperation:
        """Select ``columns`` (all of the table's by default) filtered on ``where``."""
        cols = list(table.columns) if columns is None else list(columns)
        where_cols = list(where)
        _check_owner(table, cols + where_cols, "select")
        if not cols:
            raise ConfigurationError("Cannot build select statement without columns")
        sql = f"select {', '.join(c.name for c in cols)} from {table.absolute_name}"
        if where_cols:
            sql += f" where {_predicate(where_cols)}"
        return SelectOperation(sql, build_positions(where_cols), result_columns=cols)


def _check_owner(table: Table, columns: Sequence[Column], statement: str) -> None:
    foreign = [str(c) for c in columns if c.table_name != table.absolute_name]
    if foreign:
        raise ConfigurationError(
            f"Columns {foreign} of {statement} statement don't belong to table "
            f"'{table.absolute_name}'"
        )


__all__ = ["DMLGenerator"]

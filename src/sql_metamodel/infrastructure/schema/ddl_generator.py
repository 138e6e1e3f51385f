"""DDL text generation from the schema metamodel.

Renders tables, indexes and foreign keys to ``create``/``alter`` statements.
SQL type names are never hard-coded here: they come from the injected type
renderer, one call per column.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Union

from sql_metamodel.utils.logging import get_logger

from .core import Column, ForeignKey, Index, Table

logger = get_logger(__name__)

TypeRenderer = Callable[[Column], str]


def _join_names(columns: Iterable[Column]) -> str:
    return ", ".join(c.name for c in columns)


class DDLGenerator:
    """
    Generates DDL statements for a schema graph.

    Example:
        >>> generator = DDLGenerator(lambda column: "varchar")
        >>> table = Table("users")
        >>> _ = table.add_column("name")
        >>> generator.generate_create_table(table)
        'create table users(name varchar)'
    """

    def __init__(self, type_renderer: Union[TypeRenderer, object]):
        """
        Args:
            type_renderer: callable ``Column -> str`` or an object exposing
                ``render_type(column)``, e.g. a TypeMapping
        """
        render_type = getattr(type_renderer, "render_type", None)
        if render_type is None:
            render_type = type_renderer
        if not callable(render_type):
            raise TypeError(
                f"type_renderer must be callable or define render_type(), "
                f"got {type(type_renderer).__name__}"
            )
        self._render_type: TypeRenderer = render_type

    def get_sql_type(self, column: Column) -> str:
        return self._render_type(column)

    def _column_definition(self, column: Column) -> str:
        definition = f"{column.name} {self.get_sql_type(column)}"
        if column.primary_key:
            return f"{definition} primary key"
        if not column.nullable:
            return f"{definition} not null"
        return definition

    def generate_create_table(self, table: Table) -> str:
        columns = ", ".join(self._column_definition(c) for c in table.columns)
        return f"create table {table.absolute_name}({columns})"

    def generate_create_index(self, index: Index) -> str:
        return (
            f"create index {index.name} on {index.table_name}"
            f"({_join_names(index.columns)})"
        )

    def generate_create_foreign_key(self, foreign_key: ForeignKey) -> str:
        # The constraint is attached to the referenced table's name
        target_table = foreign_key.target_table_name
        return (
            f"alter table {target_table} add constraint {foreign_key.name}"
            f" foreign key({_join_names(foreign_key.columns)})"
            f" references {target_table}({_join_names(foreign_key.target_columns)})"
        )

    def generate_drop_table(self, table: Table) -> str:
        return f"drop table {table.absolute_name}"

    def generate_drop_index(self, index: Index) -> str:
        return f"drop index {index.name}"

    def generate_drop_foreign_key(self, foreign_key: ForeignKey) -> str:
        return (
            f"alter table {foreign_key.target_table_name}"
            f" drop constraint {foreign_key.name}"
        )

    def generate_schema(
        self,
        tables: Sequence[Table],
        indexes: Sequence[Index] = (),
        foreign_keys: Sequence[ForeignKey] = (),
    ) -> List[str]:
        """Generate the full creation script, one statement per entry.

        Tables come first, then indexes, then foreign keys, so that every
        referenced table exists when its constraint is added.
        """
        sqls: List[str] = [self.generate_create_table(t) for t in tables]
        sqls.extend(self.generate_create_index(i) for i in indexes)
        sqls.extend(self.generate_create_foreign_key(fk) for fk in foreign_keys)
        logger.debug(
            "ddl.schema_generated",
            table_count=len(tables),
            index_count=len(indexes),
            foreign_key_count=len(foreign_keys),
        )
        return sqls


__all__ = ["DDLGenerator", "TypeRenderer"]

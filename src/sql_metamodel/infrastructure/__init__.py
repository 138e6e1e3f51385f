"""
Infrastructure Layer

Components:
- schema: table/column/index/foreign key metamodel and DDL generation
- mapping: per-invocation values exchanged with the mapping layer
- sql: type rendering, statement binders, DML generation, result iteration

Usage:
    from sql_metamodel.infrastructure.schema import Table, DDLGenerator
    from sql_metamodel.infrastructure.sql import DMLGenerator, TypeMapping
"""

__all__: list[str] = []

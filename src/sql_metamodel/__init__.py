"""
SQL Metamodel - relational schema graph, DDL rendering and positional
statement binding.

A small persistence core: tables, columns, indexes and foreign keys are
modelled in memory, rendered to DDL text, and bound to parameterized DML
statements executed through SQLAlchemy connections.
"""

__version__ = "0.1.0"

"""
Parameterized CRUD generation for one dialect.

``generate`` is a pure function of its inputs: it reads a parsed
:class:`Table`, looks the dialect up in the registry and returns the assembled
script text. Placeholder numbering is 1-based and, for UPDATE, continues from
the SET list into the WHERE list so positional styles (``$n``) stay unique
within the statement.
"""
from typing import List, Sequence

from .models import Column, Table
from .dialects import DialectDescriptor, get_dialect

DIFF_PLACEHOLDER = (
    "-- DDL Diff (naive placeholder):\n"
    "-- Compare desired CREATE TABLE vs information_schema to produce ALTER statements (Pro)."
)


def _params(dialect: DialectDescriptor, columns: Sequence[Column], start: int = 1) -> List[str]:
    return [dialect.param(c.name, start + i) for i, c in enumerate(columns)]


def _equalities(dialect: DialectDescriptor, columns: Sequence[Column], start: int = 1) -> List[str]:
    return [f"{c.name} = {p}" for c, p in zip(columns, _params(dialect, columns, start))]


def insert_statement(dialect: DialectDescriptor, table: Table) -> str:
    columns = table.non_pk_columns
    names = ", ".join(c.name for c in columns)
    values = ", ".join(_params(dialect, columns))
    return f"INSERT INTO {table.name} ({names})\nVALUES ({values});"


def update_statement(dialect: DialectDescriptor, table: Table) -> str:
    columns = table.non_pk_columns
    sets = ", ".join(_equalities(dialect, columns))
    where = " AND ".join(_equalities(dialect, table.effective_pk_columns(), start=len(columns) + 1))
    return f"UPDATE {table.name} SET {sets} WHERE {where};"


def select_statement(dialect: DialectDescriptor, table: Table) -> str:
    where = " AND ".join(_equalities(dialect, table.effective_pk_columns()))
    return f"SELECT * FROM {table.name} WHERE {where};"


def dml_statements(dialect_name: str, table: Table) -> List[str]:
    """INSERT, UPDATE and SELECT for *table*, without comment headers."""
    dialect = get_dialect(dialect_name)
    return [
        insert_statement(dialect, table),
        update_statement(dialect, table),
        select_statement(dialect, table),
    ]


def generate(dialect_name: str, table: Table, include_procedures: bool = False,
             include_diff_placeholder: bool = False) -> str:
    dialect = get_dialect(dialect_name)
    insert_sql, update_sql, select_sql = dml_statements(dialect_name, table)

    sections = [
        f"-- Dialect: {dialect.name}\n-- Table: {table.name}",
        f"-- INSERT\n{insert_sql}",
        f"-- UPDATE by PK\n{update_sql}",
        f"-- SELECT by PK\n{select_sql}",
    ]
    if include_procedures:
        sections.append(
            dialect.render_procedures(table.name, table.non_pk_columns, table.effective_pk_columns())
        )
    if include_diff_placeholder:
        sections.append(DIFF_PLACEHOLDER)

    return "\n\n".join(sections) + "\n"

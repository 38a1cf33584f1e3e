"""
Stored-procedure templates, one function per dialect family.

Every template takes the same arguments and returns the full procedures
section (header comment included) for INSERT, UPDATE and DELETE:

    render(dialect_name, table_name, columns, pk_columns, types) -> str

``columns`` are the non-key columns in declaration order, ``pk_columns`` the
effective key columns. Parameters are named ``p_<column>`` wherever the body
refers to them by name, so they never shadow the column itself.
"""
from typing import List, Optional, Sequence

from ..models import Column
from .type_maps import TypeMap


def _names(columns: Sequence[Column]) -> str:
    return ", ".join(c.name for c in columns)


def _assignments(columns: Sequence[Column], value) -> str:
    return ", ".join(f"{c.name} = {value(c, i)}" for i, c in enumerate(columns, start=1))


def _conditions(columns: Sequence[Column], value) -> str:
    return " AND ".join(f"{c.name} = {value(c, i)}" for i, c in enumerate(columns, start=1))


def _update_params(columns: Sequence[Column], pk_columns: Sequence[Column]) -> List[Column]:
    """SET columns followed by the key columns that are not already among them.

    With a fallback key the key column is also a SET column; it must be
    declared only once.
    """
    names = {c.name for c in columns}
    return list(columns) + [c for c in pk_columns if c.name not in names]


# ---------------------------------------------------------------------------
# SQL Server
# ---------------------------------------------------------------------------

def _tsql_procedure(table_name: str, suffix: str, params: Sequence[Column], types: TypeMap, body: str) -> str:
    lines = [f"CREATE OR ALTER PROCEDURE dbo.{table_name}_{suffix}"]
    if params:
        lines.append(",\n".join(f"  @{c.name} {types.map(c.type)}" for c in params))
    lines += ["AS", "BEGIN", "  SET NOCOUNT ON;", f"  {body}", "END;"]
    return "\n".join(lines)


def sql_server_procedures(dialect_name: str, table_name: str, columns: Sequence[Column],
                          pk_columns: Sequence[Column], types: TypeMap) -> str:
    at = lambda c, _i: f"@{c.name}"
    insert = _tsql_procedure(
        table_name, "Insert", columns, types,
        f"INSERT INTO {table_name} ({_names(columns)}) VALUES ({', '.join('@' + c.name for c in columns)});",
    )
    update = _tsql_procedure(
        table_name, "Update", _update_params(columns, pk_columns), types,
        f"UPDATE {table_name} SET {_assignments(columns, at)} WHERE {_conditions(pk_columns, at)};",
    )
    delete = _tsql_procedure(
        table_name, "Delete", pk_columns, types,
        f"DELETE FROM {table_name} WHERE {_conditions(pk_columns, at)};",
    )
    return "\n\n".join(["-- SQL Server Stored Procedures", insert, update, delete])


# ---------------------------------------------------------------------------
# MySQL / MariaDB
# ---------------------------------------------------------------------------

def _mysql_procedure(table_name: str, suffix: str, params: Sequence[Column], types: TypeMap, body: str) -> str:
    signature = ", ".join(f"IN p_{c.name} {types.map(c.type)}" for c in params)
    return (
        "DELIMITER $$\n"
        f"CREATE PROCEDURE {table_name}_{suffix}({signature})\n"
        "BEGIN\n"
        f"  {body}\n"
        "END$$\n"
        "DELIMITER ;"
    )


def mysql_procedures(dialect_name: str, table_name: str, columns: Sequence[Column],
                     pk_columns: Sequence[Column], types: TypeMap) -> str:
    named = lambda c, _i: f"p_{c.name}"
    insert = _mysql_procedure(
        table_name, "Insert", columns, types,
        f"INSERT INTO {table_name} ({_names(columns)}) VALUES ({', '.join('p_' + c.name for c in columns)});",
    )
    update = _mysql_procedure(
        table_name, "Update", _update_params(columns, pk_columns), types,
        f"UPDATE {table_name} SET {_assignments(columns, named)} WHERE {_conditions(pk_columns, named)};",
    )
    delete = _mysql_procedure(
        table_name, "Delete", pk_columns, types,
        f"DELETE FROM {table_name} WHERE {_conditions(pk_columns, named)};",
    )
    return "\n\n".join([f"-- {dialect_name} Procedures", insert, update, delete])


# ---------------------------------------------------------------------------
# PostgreSQL
# ---------------------------------------------------------------------------

def _plpgsql_function(table_name: str, suffix: str, params: Sequence[Column], types: TypeMap, body: str) -> str:
    signature = ", ".join(f"p_{c.name} {types.map(c.type)}" for c in params)
    return (
        f"CREATE OR REPLACE FUNCTION {table_name}_{suffix}({signature}) RETURNS void AS $$\n"
        "BEGIN\n"
        f"  {body}\n"
        "END;\n"
        "$$ LANGUAGE plpgsql;"
    )


def postgres_procedures(dialect_name: str, table_name: str, columns: Sequence[Column],
                        pk_columns: Sequence[Column], types: TypeMap) -> str:
    update_params = _update_params(columns, pk_columns)
    position = {}
    for i, c in enumerate(update_params, start=1):
        position.setdefault(c.name, i)
    positional = lambda _c, i: f"${i}"
    by_position = lambda c, _i: f"${position[c.name]}"
    insert = _plpgsql_function(
        table_name, "insert", columns, types,
        f"INSERT INTO {table_name} ({_names(columns)}) VALUES "
        f"({', '.join('$' + str(i) for i in range(1, len(columns) + 1))});",
    )
    update = _plpgsql_function(
        table_name, "update", update_params, types,
        f"UPDATE {table_name} SET {_assignments(columns, positional)} WHERE {_conditions(pk_columns, by_position)};",
    )
    delete = _plpgsql_function(
        table_name, "delete", pk_columns, types,
        f"DELETE FROM {table_name} WHERE {_conditions(pk_columns, positional)};",
    )
    return "\n\n".join(["-- PostgreSQL functions", insert, update, delete])


# ---------------------------------------------------------------------------
# Oracle
# ---------------------------------------------------------------------------

def _plsql_procedure(table_name: str, suffix: str, params: Sequence[Column], types: TypeMap, body: str) -> str:
    signature = ", ".join(f"p_{c.name} IN {types.map(c.type)}" for c in params)
    return (
        f"CREATE OR REPLACE PROCEDURE {table_name}_{suffix}({signature}) AS\n"
        "BEGIN\n"
        f"  {body}\n"
        "END;"
    )


def oracle_procedures(dialect_name: str, table_name: str, columns: Sequence[Column],
                      pk_columns: Sequence[Column], types: TypeMap) -> str:
    named = lambda c, _i: f"p_{c.name}"
    insert = _plsql_procedure(
        table_name, "insert", columns, types,
        f"INSERT INTO {table_name} ({_names(columns)}) VALUES ({', '.join('p_' + c.name for c in columns)});",
    )
    update = _plsql_procedure(
        table_name, "update", _update_params(columns, pk_columns), types,
        f"UPDATE {table_name} SET {_assignments(columns, named)} WHERE {_conditions(pk_columns, named)};",
    )
    delete = _plsql_procedure(
        table_name, "delete", pk_columns, types,
        f"DELETE FROM {table_name} WHERE {_conditions(pk_columns, named)};",
    )
    return "\n\n".join(["-- Oracle PL/SQL procedures", insert, update, delete])


# ---------------------------------------------------------------------------
# Everything else
# ---------------------------------------------------------------------------

def procedures_not_supported(dialect_name: str, table_name: str, columns: Sequence[Column],
                             pk_columns: Sequence[Column], types: Optional[TypeMap]) -> str:
    return f"-- {dialect_name}: stored procedures not generated; use the parameterized DML above."

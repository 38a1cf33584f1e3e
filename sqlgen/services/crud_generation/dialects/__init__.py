"""
Dialect registry.

Each supported target is described once by a :class:`DialectDescriptor`:
its placeholder style, its procedure-parameter type vocabulary and its
procedure template. Adding a dialect means adding one entry to ``_REGISTRY``.

Identifiers are matched exactly (case-sensitive). Unknown identifiers get a
fallback descriptor that uses ``:name`` placeholders and emits no procedures.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ..models import Column
from .type_maps import TypeMap, SQL_SERVER_TYPES, MYSQL_TYPES, POSTGRES_TYPES, ORACLE_TYPES
from .procedures import (
    sql_server_procedures,
    mysql_procedures,
    postgres_procedures,
    oracle_procedures,
    procedures_not_supported,
)

PlaceholderStyle = Callable[[str, int], str]
ProcedureTemplate = Callable[[str, str, Sequence[Column], Sequence[Column], Optional[TypeMap]], str]


def at_name(name: str, index: int) -> str:
    return f"@{name}"


def dollar_index(name: str, index: int) -> str:
    return f"${index}"


def question_mark(name: str, index: int) -> str:
    return "?"


def colon_name(name: str, index: int) -> str:
    return f":{name}"


@dataclass(frozen=True)
class DialectDescriptor:
    name: str
    placeholder: PlaceholderStyle = colon_name
    types: Optional[TypeMap] = None
    procedures: ProcedureTemplate = procedures_not_supported
    supported: bool = True

    def param(self, column_name: str, index: int) -> str:
        return self.placeholder(column_name, index)

    def render_procedures(self, table_name: str, columns: Sequence[Column], pk_columns: Sequence[Column]) -> str:
        return self.procedures(self.name, table_name, columns, pk_columns, self.types)


_REGISTRY: Dict[str, DialectDescriptor] = {
    d.name: d
    for d in (
        DialectDescriptor("SQL Server", at_name, SQL_SERVER_TYPES, sql_server_procedures),
        DialectDescriptor("PostgreSQL", dollar_index, POSTGRES_TYPES, postgres_procedures),
        DialectDescriptor("MySQL", question_mark, MYSQL_TYPES, mysql_procedures),
        DialectDescriptor("MariaDB", question_mark, MYSQL_TYPES, mysql_procedures),
        DialectDescriptor("SQLite", colon_name),
        DialectDescriptor("Oracle", colon_name, ORACLE_TYPES, oracle_procedures),
        DialectDescriptor("Snowflake", question_mark),
        DialectDescriptor("Spark SQL", question_mark),
    )
}

SUPPORTED_DIALECTS: List[str] = list(_REGISTRY)


def get_dialect(name: str) -> DialectDescriptor:
    """Descriptor for *name*, or a ``:name``-style fallback if it is unknown."""
    descriptor = _REGISTRY.get(name)
    if descriptor is None:
        return DialectDescriptor(name=str(name), supported=False)
    return descriptor


def is_supported(name: str) -> bool:
    return name in _REGISTRY


__all__ = [
    "DialectDescriptor",
    "SUPPORTED_DIALECTS",
    "get_dialect",
    "is_supported",
]

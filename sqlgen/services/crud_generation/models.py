"""
Table description produced by the schema parser and consumed by the generator.

Both types are frozen so a parsed table can be handed to every dialect
generator without copying.
"""
from dataclasses import dataclass, field, replace, asdict
from typing import Any, Dict, Tuple

DEFAULT_TABLE_NAME = "Table"


@dataclass(frozen=True)
class Column:
    name: str
    type: str
    is_primary_key: bool = False
    is_identity: bool = False
    is_nullable: bool = True

    def as_primary_key(self) -> "Column":
        return replace(self, is_primary_key=True)


@dataclass(frozen=True)
class Table:
    name: str = DEFAULT_TABLE_NAME
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    primary_keys: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def non_pk_columns(self) -> Tuple[Column, ...]:
        return tuple(c for c in self.columns if not c.is_primary_key)

    @property
    def pk_columns(self) -> Tuple[Column, ...]:
        return tuple(c for c in self.columns if c.is_primary_key)

    @property
    def has_declared_key(self) -> bool:
        return any(c.is_primary_key for c in self.columns)

    def effective_pk_columns(self) -> Tuple[Column, ...]:
        """Key columns used for UPDATE/SELECT/DELETE.

        When nothing is flagged as a key the first declared column stands in.
        The returned column is a flagged copy; the table itself is untouched.
        """
        pks = self.pk_columns
        if not pks and self.columns:
            return (self.columns[0].as_primary_key(),)
        return pks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columns": [asdict(c) for c in self.columns],
            "primary_keys": list(self.primary_keys),
        }

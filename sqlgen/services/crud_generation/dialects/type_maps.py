"""
Per-dialect parameter type vocabularies for stored-procedure signatures.

Mapping is by lowercase substring of the source type, first match wins, in
the order: integer, string, temporal, fixed-point, boolean. Anything else
falls back to the dialect's string type.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

INTEGER_KEYS = ("int",)
STRING_KEYS = ("char", "text")
TEMPORAL_KEYS = ("date", "time")
FIXED_POINT_KEYS = ("decimal", "numeric")
BOOLEAN_KEYS = ("bool", "bit")


@dataclass(frozen=True)
class TypeMap:
    integer: str
    string: str
    temporal: str
    fixed_point: str
    boolean: Optional[str] = None

    @property
    def rules(self) -> Tuple[Tuple[Tuple[str, ...], Optional[str]], ...]:
        return (
            (INTEGER_KEYS, self.integer),
            (STRING_KEYS, self.string),
            (TEMPORAL_KEYS, self.temporal),
            (FIXED_POINT_KEYS, self.fixed_point),
            (BOOLEAN_KEYS, self.boolean),
        )

    def map(self, source_type: str) -> str:
        lowered = (source_type or "").lower()
        for keys, target in self.rules:
            if target is None:
                continue
            if any(k in lowered for k in keys):
                return target
        return self.string


SQL_SERVER_TYPES = TypeMap(
    integer="INT",
    string="NVARCHAR(255)",
    temporal="DATETIME2",
    fixed_point="DECIMAL(18,2)",
    boolean="BIT",
)

MYSQL_TYPES = TypeMap(
    integer="INT",
    string="VARCHAR(255)",
    temporal="DATETIME",
    fixed_point="DECIMAL(18,2)",
    boolean="TINYINT(1)",
)

POSTGRES_TYPES = TypeMap(
    integer="integer",
    string="text",
    temporal="timestamp",
    fixed_point="numeric(18,2)",
    boolean="boolean",
)

# Oracle has no boolean column type before 23c; those fall back to VARCHAR2.
ORACLE_TYPES = TypeMap(
    integer="NUMBER",
    string="VARCHAR2",
    temporal="DATE",
    fixed_point="NUMBER",
)

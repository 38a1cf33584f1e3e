"""
Best-effort CREATE TABLE parser.

This is a regex-level structural extractor, not a SQL grammar. It reads the
table name, the column definitions and the primary key of a single
``CREATE TABLE`` statement and never raises: anything it cannot recognise is
dropped (and logged) so the caller always has something to render.

WHAT THIS MODULE DOES:
======================
1. Extract the table name (``CREATE TABLE <name>``), defaulting to ``Table``.
2. Take everything between the first ``(`` and the last ``)`` as the body.
3. Split the body on commas at parenthesis depth 0 so that
   ``DECIMAL(18,2)`` stays in one piece.
4. Route each clause:
     • table-level ``PRIMARY KEY (...)`` / ``CONSTRAINT x PRIMARY KEY (...)``
       → key names, no column
     • anything else → column definition (inline ``PRIMARY KEY`` flags it)
5. Flag key columns case-insensitively.
"""
import re
from typing import List, Optional, Tuple

from sqlgen.utils.logger import setup_logger
from .models import Column, Table, DEFAULT_TABLE_NAME

logger = setup_logger("crud_generation.schema_parser")

TABLE_NAME_RE = re.compile(r"CREATE\s+TABLE\s+([^\s(]+)", re.IGNORECASE)
BODY_RE = re.compile(r"\((.*)\)", re.DOTALL)
PRIMARY_KEY_RE = re.compile(r"PRIMARY\s+KEY", re.IGNORECASE)
TABLE_PK_CLAUSE_RE = re.compile(
    r"^(?:CONSTRAINT\s+\S+\s+)?PRIMARY\s+KEY\b", re.IGNORECASE
)
PAREN_GROUP_RE = re.compile(r"\(([^)]+)\)")
COLUMN_RE = re.compile(
    r"^([`\"\[\]]?)([A-Za-z0-9_]+)\1\s+([A-Za-z0-9_]+)(\([^)]+\))?\s*(.*)$",
    re.DOTALL,
)
IDENTITY_RE = re.compile(r"IDENTITY|AUTO_INCREMENT|AUTOINCREMENT|SERIAL", re.IGNORECASE)
NOT_NULL_RE = re.compile(r"NOT\s+NULL", re.IGNORECASE)

_KEY_QUOTE_CHARS = "[]\"`"


def split_top_level(body: str) -> List[str]:
    """Split *body* on commas that are not nested inside parentheses."""
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in body:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    if current:
        parts.append("".join(current))
    return parts


def extract_table_name(sql: str) -> str:
    match = TABLE_NAME_RE.search(sql)
    return match.group(1).strip() if match else DEFAULT_TABLE_NAME


def extract_key_names(clause: str) -> List[str]:
    """Key names from the first parenthesised group of a PRIMARY KEY clause."""
    match = PAREN_GROUP_RE.search(clause)
    if not match:
        return []
    names = [token.strip().strip(_KEY_QUOTE_CHARS) for token in match.group(1).split(",")]
    return [n for n in names if n]


def parse_column(clause: str) -> Optional[Column]:
    match = COLUMN_RE.match(clause)
    if not match:
        return None
    _, name, base_type, type_params, rest = match.groups()
    return Column(
        name=name,
        type=(base_type + (type_params or "")).strip(),
        is_identity=bool(IDENTITY_RE.search(rest)),
        is_nullable=not NOT_NULL_RE.search(rest),
    )


def _classify_clauses(clauses: List[str]) -> Tuple[List[Column], List[str]]:
    columns: List[Column] = []
    key_names: List[str] = []
    for raw in clauses:
        clause = raw.strip()
        if not clause:
            continue

        if TABLE_PK_CLAUSE_RE.match(clause):
            key_names.extend(extract_key_names(clause))
            continue

        column = parse_column(clause)
        if column is None:
            if PRIMARY_KEY_RE.search(clause):
                # Some other constraint form that carries the key list.
                key_names.extend(extract_key_names(clause))
            else:
                logger.warning("Dropping unrecognised clause: %s", clause[:80])
            continue

        if PRIMARY_KEY_RE.search(clause):
            key_names.append(column.name)
        columns.append(column)
    return columns, key_names


def parse_create_table(sql: str) -> Table:
    """Parse one ``CREATE TABLE`` statement into a :class:`Table`."""
    if not isinstance(sql, str) or not sql.strip():
        return Table()

    name = extract_table_name(sql)
    body_match = BODY_RE.search(sql)
    body = body_match.group(1) if body_match else ""

    columns, key_names = _classify_clauses(split_top_level(body))

    lowered_keys = {k.lower() for k in key_names}
    columns = [c.as_primary_key() if c.name.lower() in lowered_keys else c for c in columns]

    seen = set()
    for column in columns:
        lowered = column.name.lower()
        if lowered in seen:
            logger.warning("Duplicate column name '%s' in table %s; keeping both.", column.name, name)
        seen.add(lowered)

    logger.debug("Parsed table %s: %d column(s), key(s)=%s", name, len(columns), key_names)
    return Table(name=name, columns=tuple(columns), primary_keys=tuple(key_names))

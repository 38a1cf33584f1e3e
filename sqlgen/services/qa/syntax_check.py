"""Re-parse generated DML with sqlglot to catch malformed output early.

Only the INSERT / UPDATE / SELECT statements are checked. Procedure bodies
use client-side constructs (``DELIMITER``, ``$$`` quoting) that a statement
parser is not meant to accept.
"""
from __future__ import annotations
from typing import Any, Dict, List

from sqlgen.utils.logger import setup_logger
from sqlgen.services.crud_generation.models import Table
from sqlgen.services.crud_generation.generator import dml_statements
from sqlgen.services.crud_generation.utils.dialect_utils import get_sqlglot_dialect
from sqlgen.services.crud_generation.utils.parser_utils import safe_parse_one

logger = setup_logger("qa.syntax_check")


def check_statements(statements: List[str], dialect_name: str) -> List[Dict[str, Any]]:
    """Return one issue dict per statement sqlglot refuses to parse."""
    read = get_sqlglot_dialect(dialect_name)
    issues: List[Dict[str, Any]] = []
    for stmt in statements:
        ast, err = safe_parse_one(stmt, read)
        if err or ast is None:
            issues.append({
                "dialect": dialect_name,
                "statement": stmt,
                "error": err or "Parser returned no expression",
            })
    return issues


def check_generated_dml(dialect_name: str, table: Table) -> List[Dict[str, Any]]:
    """Syntax-check the parameterized DML generated for *table*.

    A table without columns only yields degenerate statements, so there is
    nothing meaningful to check and an empty list is returned.
    """
    if not table.columns:
        return []

    issues = check_statements(dml_statements(dialect_name, table), dialect_name)
    if issues:
        logger.warning(f"{len(issues)} generated statement(s) failed the {dialect_name} syntax check for {table.name}")
    return issues

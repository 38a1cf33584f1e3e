import sqlglot
from sqlglot import exp
from typing import Optional, Tuple

from sqlgen.utils.logger import setup_logger

logger = setup_logger("crud_generation.parser_utils")


def safe_parse_one(sql: str, dialect: Optional[str]) -> Tuple[Optional[exp.Expression], Optional[str]]:
    """
    Safely parses a single SQL statement into an AST.

    Args:
        sql: The SQL statement string to parse.
        dialect: The sqlglot dialect to use for parsing (None for the default).

    Returns:
        A tuple containing (ast, error_message).
        If successful, ast is the parsed expression and error_message is None.
        If it fails, ast is None and error_message describes the failure.
    """
    try:
        ast = sqlglot.parse_one(sql, read=dialect)
        return ast, None
    except Exception as e:
        logger.debug(f"Failed to parse generated statement for dialect {dialect}: {e}")
        return None, str(e)

"""
SQLGlot dialect utilities for the syntax check.
Maps the generator's dialect identifiers to the corresponding SQLGlot dialects.
"""
from typing import Optional


def get_sqlglot_dialect(dialect_name: str) -> Optional[str]:
    """
    Get the SQLGlot dialect used to re-parse generated SQL.

    Args:
        dialect_name: Generator dialect identifier (e.g., 'SQL Server', 'PostgreSQL')

    Returns:
        SQLGlot dialect string or None for the default (ANSI-ish) behaviour
    """
    dialect_map = {
        'SQL Server': 'tsql',
        'PostgreSQL': 'postgres',
        'MySQL': 'mysql',
        # SQLGlot has no separate MariaDB dialect; the MySQL one covers our DML.
        'MariaDB': 'mysql',
        'SQLite': 'sqlite',
        'Oracle': 'oracle',
        'Snowflake': 'snowflake',
        'Spark SQL': 'spark',
    }

    return dialect_map.get(dialect_name)

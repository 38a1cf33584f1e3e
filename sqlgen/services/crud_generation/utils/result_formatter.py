"""
Result formatting utilities for CRUD generation.
Builds the standardized result dictionary returned by the orchestrator and the API.
"""
from typing import Any, Dict, List, Optional

from ..models import Table


def create_result_dictionary(status: str, message: str, table: Table, results: Dict[str, str],
                             syntax_issues: Optional[List[Dict[str, Any]]] = None, **kwargs) -> dict:
    """
    Create the standardized result dictionary for a generation run.

    Args:
        status: Overall status ('success', 'partial_success', 'error')
        message: Human-readable status message
        table: The parsed table the scripts were generated from
        results: Mapping of dialect identifier to generated script text
        syntax_issues: Problems reported by the syntax check (optional)
        **kwargs: Extra top-level keys (e.g. flags actually applied)

    Returns:
        Result dictionary with the serialised table, per-dialect scripts and stats
    """
    issues = syntax_issues or []
    effective_keys = table.effective_pk_columns()

    result = {
        "status": status,
        "message": message,
        "table": {
            **table.to_dict(),
            "effective_primary_keys": [c.name for c in effective_keys],
            "primary_key_inferred": bool(effective_keys) and not table.has_declared_key,
        },
        "results": results,
        "syntax_issues": issues,
        "stats": {
            "dialects_generated": len(results),
            "columns_parsed": len(table.columns),
            "syntax_issue_count": len(issues),
        },
    }
    result.update(kwargs)
    return result

"""GenerationOrchestrator – high-level driver for CRUD script generation.

Responsibilities
----------------
1. Resolve the requested target dialects (config default when none given).
2. Parse the CREATE TABLE text once.
3. Call the generator once per dialect and collect ``{dialect: script}``.
4. Optionally run the sqlglot syntax check over the generated DML.
5. Produce the standardized result dictionary.

All SQL knowledge lives in the parser / generator / dialect registry; the
orchestrator only handles target resolution, logging and aggregation.

NOTE: Entitlement (the Pro cookie) is checked by the API layer. The
orchestrator trusts the flags it is given.
"""

from time import time
from typing import Dict, Iterable, List, Optional, Tuple

from sqlgen import config
from sqlgen.utils.logger import setup_logger
from sqlgen.services.qa import check_generated_dml
from .dialects import SUPPORTED_DIALECTS, is_supported
from .generator import generate
from .models import Table
from .schema_parser import parse_create_table
from .utils.result_formatter import create_result_dictionary


def resolve_targets(targets: Optional[Iterable[str]]) -> List[str]:
    """Requested dialects in order, de-duplicated; config default when empty."""
    requested = [t for t in (targets or []) if isinstance(t, str) and t.strip()]
    if not requested:
        requested = config.get("generation", {}).get("default_targets") or list(SUPPORTED_DIALECTS)

    resolved: List[str] = []
    for target in requested:
        if target not in resolved:
            resolved.append(target)
    return resolved


class GenerationOrchestrator:

    def __init__(self, targets: Optional[Iterable[str]] = None, *, include_procedures: bool = False,
                 include_diff: bool = False, syntax_check: Optional[bool] = None):
        self.logger = setup_logger("GenerationOrchestrator")
        self.targets = resolve_targets(targets)
        self.include_procedures = include_procedures
        self.include_diff = include_diff
        if syntax_check is None:
            syntax_check = config.get("generation", {}).get("syntax_check", True)
        self.syntax_check = syntax_check

    def generate_scripts(self, table: Table) -> Tuple[Dict[str, str], List[dict]]:
        """Generate one script per target for an already-parsed table."""
        results: Dict[str, str] = {}
        issues: List[dict] = []
        for i, dialect in enumerate(self.targets):
            self.logger.info(f"[{i + 1}/{len(self.targets)}] Generating {dialect} script for {table.name}")
            if not is_supported(dialect):
                self.logger.warning(f"Unknown dialect '{dialect}'; using fallback placeholders and no procedures.")
            results[dialect] = generate(dialect, table, self.include_procedures, self.include_diff)
            if self.syntax_check:
                issues.extend(check_generated_dml(dialect, table))
        return results, issues

    def run(self, create_sql: str) -> dict:
        """Parse *create_sql* and generate scripts for every target."""
        start = time()
        table = parse_create_table(create_sql)
        results, issues = self.generate_scripts(table)

        if not table.columns:
            status = "partial_success"
            message = "No column definitions recognised; generated statements are empty."
        elif issues:
            status = "partial_success"
            message = f"Generated {len(results)} script(s); {len(issues)} statement(s) failed the syntax check."
        else:
            status = "success"
            message = f"Generated {len(results)} script(s) for table {table.name}."

        result = create_result_dictionary(
            status,
            message,
            table,
            results,
            issues,
            targets=self.targets,
            include_procedures=self.include_procedures,
            include_diff=self.include_diff,
        )
        result["duration_s"] = round(time() - start, 4)
        self.logger.info(f"{message} ({result['duration_s']}s)")
        return result

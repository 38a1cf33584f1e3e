"""QA utilities subpackage.

Exports helper(s) for sanity-checking generated SQL before it is handed out.
"""

from .syntax_check import check_generated_dml  # noqa: F401

__all__ = ["check_generated_dml"]

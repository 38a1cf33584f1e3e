"""Tests for GenerationOrchestrator and target resolution."""

from conftest import NO_KEY_SQL, ORDER_LINES_SQL, USERS_SQL
from sqlgen.services.crud_generation import SUPPORTED_DIALECTS, GenerationOrchestrator
from sqlgen.services.crud_generation.orchestrator import resolve_targets


def test_resolve_targets_defaults_to_configured_dialects():
    assert resolve_targets(None) == SUPPORTED_DIALECTS
    assert resolve_targets([]) == SUPPORTED_DIALECTS
    assert resolve_targets(["", "  "]) == SUPPORTED_DIALECTS


def test_resolve_targets_keeps_order_and_drops_duplicates():
    assert resolve_targets(["PostgreSQL", "SQL Server", "PostgreSQL"]) == ["PostgreSQL", "SQL Server"]


def test_run_produces_one_script_per_target():
    orchestrator = GenerationOrchestrator(["SQL Server", "PostgreSQL"], syntax_check=False)
    result = orchestrator.run(USERS_SQL)

    assert result["status"] == "success"
    assert list(result["results"]) == ["SQL Server", "PostgreSQL"]
    assert "VALUES (@Name);" in result["results"]["SQL Server"]
    assert "VALUES ($1);" in result["results"]["PostgreSQL"]
    assert result["stats"] == {"dialects_generated": 2, "columns_parsed": 2, "syntax_issue_count": 0}
    assert result["table"]["name"] == "Users"
    assert result["table"]["effective_primary_keys"] == ["UserId"]
    assert result["table"]["primary_key_inferred"] is False
    assert "duration_s" in result


def test_run_defaults_to_every_dialect():
    result = GenerationOrchestrator(syntax_check=False).run(ORDER_LINES_SQL)
    assert list(result["results"]) == SUPPORTED_DIALECTS


def test_flags_are_passed_through():
    result = GenerationOrchestrator(
        ["Oracle"], include_procedures=True, include_diff=True, syntax_check=False
    ).run(USERS_SQL)
    script = result["results"]["Oracle"]
    assert "-- Oracle PL/SQL procedures" in script
    assert "-- DDL Diff (naive placeholder):" in script
    assert result["include_procedures"] is True
    assert result["include_diff"] is True


def test_inferred_key_is_reported():
    result = GenerationOrchestrator(["MySQL"], syntax_check=False).run(NO_KEY_SQL)
    assert result["table"]["primary_keys"] == []
    assert result["table"]["effective_primary_keys"] == ["Message"]
    assert result["table"]["primary_key_inferred"] is True


def test_malformed_input_is_partial_success():
    result = GenerationOrchestrator(["SQL Server", "Foo"]).run("not sql at all")
    assert result["status"] == "partial_success"
    assert result["table"]["name"] == "Table"
    assert result["table"]["columns"] == []
    assert result["table"]["primary_key_inferred"] is False
    assert set(result["results"]) == {"SQL Server", "Foo"}
    assert result["syntax_issues"] == []


def test_mysql_output_passes_syntax_check():
    result = GenerationOrchestrator(["MySQL"], syntax_check=True).run(USERS_SQL)
    assert result["syntax_issues"] == []
    assert result["status"] == "success"

"""
CRUD Generation Package - CREATE TABLE to parameterized SQL for several dialects.

Main Components:
    - parse_create_table: best-effort CREATE TABLE parser
    - generate: per-dialect INSERT / UPDATE / SELECT (+ optional procedures)
    - GenerationOrchestrator: parse once, generate for every requested dialect
    - dialects: registry of supported targets (placeholders, types, procedures)

Usage:
    from sqlgen.services.crud_generation import GenerationOrchestrator

    orchestrator = GenerationOrchestrator(["SQL Server", "PostgreSQL"], include_procedures=True)
    result = orchestrator.run("CREATE TABLE Users (UserId INT PRIMARY KEY, Name VARCHAR(100))")
    print(result["results"]["PostgreSQL"])
"""

from .models import Column, Table
from .schema_parser import parse_create_table
from .generator import generate
from .dialects import SUPPORTED_DIALECTS
from .orchestrator import GenerationOrchestrator

__all__ = [
    'Column',
    'Table',
    'parse_create_table',
    'generate',
    'SUPPORTED_DIALECTS',
    'GenerationOrchestrator',
]

"""Tests for the Streamlit frontend's API helpers (no server needed)."""

import importlib
from pathlib import Path

import pytest

FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"


class FakeResponse:
    def __init__(self, content=b"", headers=None, status_code=200):
        self.content = content
        self.headers = headers or {}
        self.status_code = status_code

    def raise_for_status(self):
        pass


@pytest.fixture
def frontend_utils(monkeypatch):
    monkeypatch.syspath_prepend(str(FRONTEND_DIR))
    return importlib.import_module("utils")


def test_download_uses_server_archive_name_and_given_request(frontend_utils, monkeypatch):
    calls = []

    def fake_post(url, json=None, cookies=None):
        calls.append((url, json, cookies))
        return FakeResponse(b"PK", {"content-disposition": 'attachment; filename="dbo._order_lines_scripts.zip"'})

    monkeypatch.setattr(frontend_utils.requests, "post", fake_post)

    zip_bytes, file_name = frontend_utils.download_sql_api(
        "CREATE TABLE dbo.[Order Lines] (Id INT)", ["MySQL"], False, False, pro=True
    )

    assert zip_bytes == b"PK"
    assert file_name == "dbo._order_lines_scripts.zip"
    assert len(calls) == 1
    url, payload, cookies = calls[0]
    assert url.endswith("/sql/generate/download")
    assert payload["create_sql"] == "CREATE TABLE dbo.[Order Lines] (Id INT)"
    assert payload["targets"] == ["MySQL"]
    assert cookies == {frontend_utils.PRO_COOKIE_NAME: frontend_utils.PRO_COOKIE_VALUE}


def test_download_without_disposition_header_uses_default_name(frontend_utils, monkeypatch):
    monkeypatch.setattr(frontend_utils.requests, "post", lambda *a, **kw: FakeResponse(b"PK"))
    assert frontend_utils.download_sql_api("CREATE TABLE t (Id INT)", [], True, True) == (b"PK", "scripts.zip")

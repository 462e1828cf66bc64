"""Tests for create_service."""

import pytest

from dataservice import SQLiteFactService, SupabaseFactService, create_service


def test_sqlite_backend(tmp_path):
    service = create_service("sqlite", db_path=tmp_path / "facts.db")
    assert isinstance(service, SQLiteFactService)


def test_sqlite_needs_path():
    with pytest.raises(ValueError):
        create_service("sqlite")


def test_supabase_from_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "anon")
    service = create_service("supabase")
    assert isinstance(service, SupabaseFactService)
    assert service.endpoint == "https://abc.supabase.co/rest/v1/facts"


def test_supabase_missing_settings(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    with pytest.raises(ValueError, match="service.url"):
        create_service("supabase")


def test_unknown_backend():
    with pytest.raises(ValueError, match="Unknown backend"):
        create_service("mongo")

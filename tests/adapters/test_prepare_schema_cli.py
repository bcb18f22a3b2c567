"""Tests for the prepare_schema_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import prepare_schema_cli


def test_main_prepares_schema(monkeypatch, capsys):
    """The CLI should create the tables through the adapter."""
    dummy_adapter = object()
    prepared = []
    monkeypatch.setattr(
        prepare_schema_cli,
        "get_app_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(
        prepare_schema_cli,
        "build_database_adapter",
        lambda: dummy_adapter,
    )
    monkeypatch.setattr(
        prepare_schema_cli,
        "prepare_schema",
        prepared.append,
    )

    prepare_schema_cli.main()

    assert prepared == [dummy_adapter]
    assert "debt_strategies" in capsys.readouterr().out

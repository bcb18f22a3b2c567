"""Tests for the record_payment_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import record_payment_cli
from src.domain.models import DebtPayment


def _payment() -> DebtPayment:
    return DebtPayment(
        id="pay-1",
        debt_id="debt-1",
        user_id="user-1",
        payment_date=date(2026, 2, 1),
        amount=Decimal("1500"),
        principal_amount=Decimal("1480"),
        interest_amount=Decimal("20"),
        remaining_balance=Decimal("520"),
    )


def _clear_env(monkeypatch) -> None:
    for name in [
        "DEBT_USER_ID",
        "DEBT_ID",
        "DEBT_PAYMENT_AMOUNT",
        "DEBT_PAYMENT_DATE",
        "DEBT_PAYMENT_EXTRA",
        "DEBT_PAYMENT_NOTES",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_main_records_payment_and_prints_balance(monkeypatch, capsys):
    """The CLI should pass parsed inputs to the use case."""
    _clear_env(monkeypatch)
    fake_logger = MagicMock()
    dummy_repository = object()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = _payment()
    monkeypatch.setenv("DEBT_USER_ID", "user-1")
    monkeypatch.setenv("DEBT_ID", "debt-1")
    monkeypatch.setenv("DEBT_PAYMENT_AMOUNT", "1500")
    monkeypatch.setenv("DEBT_PAYMENT_DATE", "2026-02-01")
    monkeypatch.setenv("DEBT_PAYMENT_EXTRA", "true")
    monkeypatch.setattr(
        record_payment_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        record_payment_cli,
        "build_debt_repository",
        lambda: dummy_repository,
    )

    def _fake_use_case(debt_repository, logger):
        assert debt_repository is dummy_repository
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(
        record_payment_cli,
        "RecordDebtPaymentUseCase",
        _fake_use_case,
    )

    record_payment_cli.main()

    fake_use_case.execute.assert_called_once_with(
        "user-1",
        "debt-1",
        Decimal("1500"),
        payment_date=date(2026, 2, 1),
        is_extra_payment=True,
        notes=None,
    )
    captured = capsys.readouterr()
    assert "Recorded $1,500.00 on debt-1" in captured.out
    assert "Remaining balance $520.00." in captured.out


def test_main_requires_inputs(monkeypatch, capsys):
    """Missing identifiers are reported without touching the store."""
    _clear_env(monkeypatch)
    fake_logger = MagicMock()
    build_repository = MagicMock()
    monkeypatch.setenv("DEBT_PAYMENT_AMOUNT", "10")
    monkeypatch.setattr(
        record_payment_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        record_payment_cli,
        "build_debt_repository",
        build_repository,
    )

    record_payment_cli.main()

    fake_logger.warning.assert_called_once()
    build_repository.assert_not_called()
    assert capsys.readouterr().out == ""


def test_main_logs_use_case_errors(monkeypatch, capsys):
    """Lookup and validation errors are logged."""
    _clear_env(monkeypatch)
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    fake_use_case.execute.side_effect = RuntimeError("Debt debt-1 not found")
    monkeypatch.setenv("DEBT_USER_ID", "user-1")
    monkeypatch.setenv("DEBT_ID", "debt-1")
    monkeypatch.setenv("DEBT_PAYMENT_AMOUNT", "10")
    monkeypatch.setattr(
        record_payment_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        record_payment_cli,
        "build_debt_repository",
        lambda: object(),
    )
    monkeypatch.setattr(
        record_payment_cli,
        "RecordDebtPaymentUseCase",
        lambda debt_repository, logger: fake_use_case,
    )

    record_payment_cli.main()

    fake_logger.error.assert_called_once_with("Debt debt-1 not found")
    assert capsys.readouterr().out == ""

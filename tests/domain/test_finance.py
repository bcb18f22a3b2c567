"""Tests for the debt summary and cash-flow services."""

from datetime import date
from decimal import Decimal

from src.domain.models import Debt, DebtType
from src.domain.services.finance import (
    build_financial_snapshot,
    calculate_cash_flow_impact,
    calculate_debt_summary,
    weighted_average_interest,
)

TODAY = date(2026, 1, 15)


def _debt(debt_id, balance, rate=None, minimum=None) -> Debt:
    return Debt(
        id=debt_id,
        user_id="user-1",
        creditor_name=debt_id.title(),
        debt_type=DebtType.CREDIT_CARD,
        current_balance=Decimal(str(balance)),
        interest_rate=None if rate is None else Decimal(str(rate)),
        minimum_payment=None if minimum is None else Decimal(str(minimum)),
    )


def test_empty_portfolio_summary_is_zero():
    """No debts means zero totals and no NaN averages."""
    summary = calculate_debt_summary([], Decimal("4000"), today=TODAY)

    assert summary.total_debt == 0
    assert summary.total_minimum_payment == 0
    assert summary.average_interest_rate == 0
    assert summary.weighted_average_interest == 0
    assert not summary.weighted_average_interest.is_nan()
    assert summary.highest_interest_debt is None
    assert summary.smallest_balance_debt is None
    assert summary.debt_to_income_ratio == 0
    assert summary.projected_payoff_date == TODAY
    assert summary.total_interest_to_pay == 0


def test_summary_aggregates_portfolio():
    """Totals, averages and notable debts should reflect the portfolio."""
    card = _debt("card", 1000, rate=25, minimum=50)
    loan = _debt("loan", 3000, rate=5, minimum=100)

    summary = calculate_debt_summary([card, loan], Decimal("2000"), today=TODAY)

    assert summary.total_debt == Decimal("4000")
    assert summary.total_minimum_payment == Decimal("150")
    assert summary.average_interest_rate == Decimal("15")
    assert summary.weighted_average_interest == Decimal("10")
    assert summary.highest_interest_debt is card
    assert summary.smallest_balance_debt is card
    assert summary.debt_to_income_ratio == Decimal("7.5")
    assert summary.total_interest_to_pay > 0
    assert summary.projected_payoff_date > TODAY


def test_summary_handles_missing_rates_and_income():
    """Missing rates count as zero and zero income gives a zero ratio."""
    debt = _debt("family", 600, minimum=100)

    summary = calculate_debt_summary([debt], 0, today=TODAY)

    assert summary.weighted_average_interest == 0
    assert summary.debt_to_income_ratio == 0
    assert summary.projected_payoff_date == date(2026, 7, 15)


def test_weighted_average_ignores_zero_total():
    """A portfolio of cleared debts has a zero weighted rate."""
    assert weighted_average_interest([_debt("paid", 0, rate=20)]) == 0


def test_cash_flow_reference_case():
    """5000 income, 3000 expenses, 1000 minimums leaves 1000."""
    debts = [
        _debt("card", 5000, rate=20, minimum=400),
        _debt("loan", 9000, rate=7, minimum=600),
    ]

    impact = calculate_cash_flow_impact(5000, 3000, debts, 0)

    assert impact.available_income == Decimal("5000")
    assert impact.total_debt_payments == Decimal("1000")
    assert impact.remaining_after_debt == Decimal("1000")
    assert impact.discretionary_income == Decimal("1000")
    assert impact.debt_payment_percentage == Decimal("20")
    assert impact.emergency_fund_coverage == 0


def test_cash_flow_shortfall_keeps_discretionary_at_zero():
    """A shortfall is visible in remaining but not in discretionary income."""
    debts = [_debt("card", 5000, rate=20, minimum=500)]

    impact = calculate_cash_flow_impact(2000, 1800, debts, Decimal("4600"))

    assert impact.remaining_after_debt == Decimal("-300")
    assert impact.discretionary_income == 0
    assert impact.emergency_fund_coverage == Decimal("2")


def test_cash_flow_with_nothing_to_pay():
    """Zero expenses and no debts give zero coverage, not an error."""
    impact = calculate_cash_flow_impact(0, 0, [], 1000)

    assert impact.emergency_fund_coverage == 0
    assert impact.debt_payment_percentage == 0


def test_snapshot_keeps_negative_availability():
    """available_for_debt may be negative; the extra pool may not."""
    debts = [_debt("card", 2000, rate=22, minimum=300)]

    snapshot = build_financial_snapshot(debts, 2000, 1900, 500)

    assert snapshot.available_for_debt == Decimal("-200")
    assert snapshot.extra_payment_pool == 0
    assert snapshot.total_debt == Decimal("2000")
    assert snapshot.weighted_avg_interest == Decimal("22")
    assert snapshot.debt_to_income_ratio == Decimal("15")
    assert snapshot.emergency_fund == Decimal("500")

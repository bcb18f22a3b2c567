"""Tests for SimulateDebtScenariosUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.simulate_scenarios import (
    SimulateDebtScenariosUseCase,
    default_assumptions,
)
from src.domain.models import (
    Debt,
    DebtType,
    FinancialSnapshot,
    SimulationAssumptions,
)
from src.domain.services import build_financial_snapshot
from src.domain.services.strategies import generate_hybrid_strategy

TODAY = date(2026, 1, 1)


def _debts() -> list[Debt]:
    return [
        Debt(
            id="card",
            user_id="user-1",
            creditor_name="Card",
            debt_type=DebtType.CREDIT_CARD,
            current_balance=Decimal("3000"),
            interest_rate=Decimal("22"),
            minimum_payment=Decimal("90"),
            credit_limit=Decimal("5000"),
        ),
        Debt(
            id="car",
            user_id="user-1",
            creditor_name="Car",
            debt_type=DebtType.AUTO_LOAN,
            current_balance=Decimal("8000"),
            interest_rate=Decimal("6"),
            minimum_payment=Decimal("250"),
        ),
    ]


def _strategy(debts):
    snapshot: FinancialSnapshot = build_financial_snapshot(debts, 4000, 3000)
    return generate_hybrid_strategy(debts, snapshot, today=TODAY)


def test_default_assumptions_cover_common_variations():
    """The default run set starts with the unchanged base."""
    extras = [
        assumption.monthly_extra_payment for assumption in default_assumptions()
    ]

    assert len(default_assumptions()) == 4
    assert extras[:2] == [Decimal("0"), Decimal("100")]


def test_runs_default_scenarios_in_order():
    """Each default assumption yields one named simulation."""
    debts = _debts()
    logger = MagicMock()
    use_case = SimulateDebtScenariosUseCase(logger=logger, today=TODAY)

    simulations = use_case.execute(debts, _strategy(debts))

    assert [simulation.name for simulation in simulations] == [
        "Base Scenario",
        "Extra Payments",
        "Income Decrease",
        "Rate Increase",
    ]
    base, extra = simulations[0], simulations[1]
    assert extra.outcomes.total_interest_paid < base.outcomes.total_interest_paid
    assert extra.outcomes.debt_free_date <= base.outcomes.debt_free_date
    logger.info.assert_called_once()


def test_custom_assumptions_are_used_as_given():
    """Explicit assumption sets replace the defaults."""
    debts = _debts()
    use_case = SimulateDebtScenariosUseCase(logger=MagicMock(), today=TODAY)

    simulations = use_case.execute(
        debts,
        _strategy(debts),
        [SimulationAssumptions(unexpected_expenses=[Decimal("500")])],
    )

    assert len(simulations) == 1
    assert simulations[0].name == "With Emergencies"


def test_invalid_debts_are_rejected():
    """Negative balances fail before simulating."""
    debts = _debts()
    strategy = _strategy(debts)
    broken = [
        Debt(
            id="bad",
            user_id="user-1",
            creditor_name="Bad",
            debt_type=DebtType.OTHER,
            current_balance=Decimal("-1"),
        )
    ]
    use_case = SimulateDebtScenariosUseCase(logger=MagicMock(), today=TODAY)

    with pytest.raises(ValueError):
        use_case.execute(broken, strategy)

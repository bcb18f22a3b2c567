"""CLI adapter to generate a repayment strategy for a user's debts.

Inputs come from environment variables: ``DEBT_USER_ID``,
``DEBT_MONTHLY_INCOME``, ``DEBT_MONTHLY_EXPENSES``, ``DEBT_EMERGENCY_FUND``,
``DEBT_STRATEGY_TYPE``, ``DEBT_SAVE_STRATEGY`` and ``DEBT_SIMULATE``.
"""

import asyncio
import os

from src.adapters.env_parsing import parse_amount, parse_flag
from src.application.use_cases.generate_debt_strategy import (
    DebtStrategyReport,
    parse_strategy_type,
)
from src.application.use_cases.manage_strategies import (
    SaveDebtStrategyUseCase,
)
from src.application.use_cases.simulate_scenarios import (
    SimulateDebtScenariosUseCase,
)
from src.infrastructure.container import (
    build_debt_repository,
    build_generate_debt_strategy_use_case,
)
from src.infrastructure.logging.logger import get_app_logger


def _payoff_label(never_pays_off: bool, payoff_date, prefix: str) -> str:
    if never_pays_off:
        return "never pays off"
    return f"{prefix} {payoff_date.isoformat()}"


def _print_report(report: DebtStrategyReport) -> None:
    strategy = report.strategy
    print(f"{strategy.strategy_name}: {strategy.methodology}")
    print(
        f"Total debt ${report.summary.total_debt:,.2f}, "
        f"available for debt ${report.snapshot.available_for_debt:,.2f}, "
        f"risk score {strategy.risk_score}/100."
    )
    for priority in strategy.debt_order:
        payoff = _payoff_label(
            priority.never_pays_off,
            priority.projected_payoff,
            "payoff",
        )
        print(
            f"  {priority.priority}. {priority.debt_id}: "
            f"${priority.monthly_payment:,.2f} "
            f"+ ${priority.extra_payment:,.2f} extra, "
            f"{payoff} "
            f"({priority.reasoning})"
        )
    for rec in strategy.recommendations:
        print(f"  - [{rec.effort.value}] {rec.action}")
    print(report.insight)


def main() -> None:
    """Generate and print a strategy for the configured user."""
    logger = get_app_logger()
    user_id = os.getenv("DEBT_USER_ID")
    if not user_id:
        logger.warning("DEBT_USER_ID is required to generate a strategy.")
        return
    income = parse_amount(
        os.getenv("DEBT_MONTHLY_INCOME"),
        "DEBT_MONTHLY_INCOME",
        logger,
    )
    expenses = parse_amount(
        os.getenv("DEBT_MONTHLY_EXPENSES"),
        "DEBT_MONTHLY_EXPENSES",
        logger,
    )
    if income is None or expenses is None:
        logger.warning(
            "DEBT_MONTHLY_INCOME and DEBT_MONTHLY_EXPENSES are required."
        )
        return
    emergency_fund = parse_amount(
        os.getenv("DEBT_EMERGENCY_FUND"),
        "DEBT_EMERGENCY_FUND",
        logger,
    )
    strategy_type = parse_strategy_type(
        os.getenv("DEBT_STRATEGY_TYPE", "ai_optimized")
    )

    repository = build_debt_repository()
    debts = repository.get_debts(user_id)
    if not debts:
        print(f"No active debts found for user {user_id}.")
        return

    use_case = build_generate_debt_strategy_use_case()
    try:
        report = asyncio.run(
            use_case.execute(
                debts,
                income,
                expenses,
                emergency_fund or 0,
                strategy_type,
            )
        )
    except ValueError as exc:
        logger.error(str(exc))
        return
    _print_report(report)

    if parse_flag(os.getenv("DEBT_SIMULATE")):
        simulations = SimulateDebtScenariosUseCase(logger=logger).execute(
            debts,
            report.strategy,
        )
        for simulation in simulations:
            outcomes = simulation.outcomes
            label = _payoff_label(
                outcomes.never_pays_off,
                outcomes.debt_free_date,
                "debt free",
            )
            print(
                f"{simulation.name}: {label}, "
                f"interest ${outcomes.total_interest_paid:,.2f}, "
                f"success {outcomes.success_probability}%"
            )

    if parse_flag(os.getenv("DEBT_SAVE_STRATEGY")):
        saved = SaveDebtStrategyUseCase(repository, logger=logger).execute(
            user_id,
            strategy_type,
            report.strategy,
        )
        print(f"Saved strategy {saved.id} as active.")


if __name__ == "__main__":  # pragma: no cover
    main()

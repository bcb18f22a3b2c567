"""Domain services for portfolio summaries and monthly cash flow."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models import (
    CashFlowImpact,
    Debt,
    DebtSummary,
    FinancialSnapshot,
)
from src.domain.services.amortization import (
    calculate_payoff,
    projected_payoff_date,
)
from src.utils.decimal_utils import coerce_decimal, safe_divide

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def total_balance(debts: Iterable[Debt]) -> Decimal:
    """Return the sum of current balances."""
    return sum((debt.current_balance for debt in debts), ZERO)


def total_minimum_payments(debts: Iterable[Debt]) -> Decimal:
    """Return the sum of minimum payments, missing values counted as zero."""
    return sum((debt.minimum for debt in debts), ZERO)


def weighted_average_interest(debts: Iterable[Debt]) -> Decimal:
    """Return the balance-weighted annual rate, zero for an empty balance."""
    debts = list(debts)
    total = total_balance(debts)
    if total == 0:
        return ZERO
    return sum(
        (debt.rate * debt.current_balance / total for debt in debts),
        ZERO,
    )


def debt_to_income_ratio(minimum_payments: Decimal, income: Decimal) -> Decimal:
    """Return minimum payments as a percentage of income."""
    if income <= 0:
        return ZERO
    return minimum_payments / income * HUNDRED


def calculate_debt_summary(
    debts: list[Debt],
    monthly_income=ZERO,
    today: date | None = None,
) -> DebtSummary:
    """Aggregate a debt portfolio into summary statistics.

    Args:
        debts: Debts in the portfolio.
        monthly_income: Gross monthly income used for the debt-to-income ratio.
        today: Reference date for the projected payoff; defaults to today.

    Returns:
        DebtSummary: Totals, averages, notable debts, and payoff projection.
    """
    today = today or date.today()
    income = coerce_decimal(monthly_income)
    total_debt = total_balance(debts)
    total_minimum = total_minimum_payments(debts)

    average_rate = ZERO
    if debts:
        average_rate = sum((debt.rate for debt in debts), ZERO) / len(debts)

    highest: Debt | None = None
    smallest: Debt | None = None
    for debt in debts:
        if highest is None or debt.rate > highest.rate:
            highest = debt
        if smallest is None or debt.current_balance < smallest.current_balance:
            smallest = debt

    total_interest = ZERO
    longest_payoff = 0
    for debt in debts:
        calculation = calculate_payoff(debt, debt.minimum)
        total_interest += calculation.total_interest
        longest_payoff = max(longest_payoff, calculation.months_to_payoff)

    return DebtSummary(
        total_debt=total_debt,
        total_minimum_payment=total_minimum,
        average_interest_rate=average_rate,
        weighted_average_interest=weighted_average_interest(debts),
        highest_interest_debt=highest,
        smallest_balance_debt=smallest,
        debt_to_income_ratio=debt_to_income_ratio(total_minimum, income),
        projected_payoff_date=projected_payoff_date(today, longest_payoff),
        total_interest_to_pay=total_interest,
    )


def calculate_cash_flow_impact(
    monthly_income,
    monthly_expenses,
    debts: list[Debt],
    emergency_fund=ZERO,
) -> CashFlowImpact:
    """Compute the monthly cash left after expenses and minimum payments.

    Args:
        monthly_income: Gross monthly income.
        monthly_expenses: Monthly non-debt expenses.
        debts: Debts whose minimum payments are due.
        emergency_fund: Savings available for emergencies.

    Returns:
        CashFlowImpact: Remaining cash, coverage months, and payment share.
    """
    income = coerce_decimal(monthly_income)
    expenses = coerce_decimal(monthly_expenses)
    fund = coerce_decimal(emergency_fund)
    total_debt_payments = total_minimum_payments(debts)
    remaining_after_debt = income - expenses - total_debt_payments

    return CashFlowImpact(
        available_income=income,
        total_debt_payments=total_debt_payments,
        remaining_after_debt=remaining_after_debt,
        emergency_fund_coverage=safe_divide(
            fund,
            expenses + total_debt_payments,
        ),
        discretionary_income=max(ZERO, remaining_after_debt),
        debt_payment_percentage=debt_to_income_ratio(
            total_debt_payments,
            income,
        ),
    )


def build_financial_snapshot(
    debts: list[Debt],
    monthly_income,
    monthly_expenses,
    emergency_fund=ZERO,
) -> FinancialSnapshot:
    """Build the monthly snapshot consumed by the strategy generators.

    ``available_for_debt`` is left negative when income does not cover
    expenses and minimum payments.
    """
    income = coerce_decimal(monthly_income)
    expenses = coerce_decimal(monthly_expenses)
    minimums = total_minimum_payments(debts)
    return FinancialSnapshot(
        monthly_income=income,
        monthly_expenses=expenses,
        available_for_debt=income - expenses - minimums,
        emergency_fund=coerce_decimal(emergency_fund),
        debt_to_income_ratio=debt_to_income_ratio(minimums, income),
        total_debt=total_balance(debts),
        weighted_avg_interest=weighted_average_interest(debts),
    )


__all__ = [
    "total_balance",
    "total_minimum_payments",
    "weighted_average_interest",
    "debt_to_income_ratio",
    "calculate_debt_summary",
    "calculate_cash_flow_impact",
    "build_financial_snapshot",
]

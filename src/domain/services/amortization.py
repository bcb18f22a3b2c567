"""Amortization engine: month-by-month payoff simulation for one debt."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal
import math

from dateutil.relativedelta import relativedelta

from src.domain.constants import MAX_PAYOFF_MONTHS, PAYOFF_EPSILON
from src.domain.models import (
    ConsolidationAnalysis,
    Debt,
    DebtPayment,
    MonthlyPayment,
    PayoffCalculation,
)
from src.utils.decimal_utils import coerce_decimal, quantize_money

ZERO = Decimal("0")


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Convert an annual percentage rate to a monthly periodic rate."""
    return annual_rate / Decimal("100") / Decimal("12")


def calculate_payoff(
    debt: Debt,
    monthly_payment,
    extra_payment=ZERO,
) -> PayoffCalculation:
    """Simulate paying off a debt with a fixed monthly payment.

    The simulation stops once the balance drops to one cent or after
    ``MAX_PAYOFF_MONTHS`` months. A payment that does not cover the accruing
    interest therefore ends at the cap with the balance unreduced; callers
    detect this through ``PayoffCalculation.never_pays_off``.

    Args:
        debt: Debt to simulate.
        monthly_payment: Regular monthly payment.
        extra_payment: Additional amount paid every month.

    Returns:
        PayoffCalculation: Months to payoff, total interest, and schedule.
    """
    total_payment = coerce_decimal(monthly_payment) + coerce_decimal(
        extra_payment
    )
    rate = monthly_rate(debt.rate)
    balance = debt.current_balance
    total_interest = ZERO
    payments: list[MonthlyPayment] = []
    month = 0

    while balance > PAYOFF_EPSILON and month < MAX_PAYOFF_MONTHS:
        month += 1
        interest = balance * rate
        principal = min(total_payment - interest, balance)
        balance -= principal
        total_interest += interest
        payments.append(
            MonthlyPayment(
                month=month,
                payment_amount=principal + interest,
                principal_amount=principal,
                interest_amount=interest,
                remaining_balance=max(ZERO, balance),
            )
        )

    return PayoffCalculation(
        debt_id=debt.id,
        months_to_payoff=month,
        total_interest=total_interest,
        total_amount=debt.current_balance + total_interest,
        monthly_payments=payments,
    )


def projected_payoff_date(today: date, months: int) -> date:
    """Return the date ``months`` calendar months after ``today``."""
    return today + relativedelta(months=months)


def calculate_interest_savings(
    debt: Debt,
    current_payment,
    new_payment,
) -> tuple[Decimal, int]:
    """Compare two payment levels for the same debt.

    Returns:
        tuple[Decimal, int]: Interest saved and months reduced by switching
        from ``current_payment`` to ``new_payment``.
    """
    current = calculate_payoff(debt, current_payment)
    proposed = calculate_payoff(debt, new_payment)
    return (
        current.total_interest - proposed.total_interest,
        current.months_to_payoff - proposed.months_to_payoff,
    )


def analyze_consolidation(
    debts: Iterable[Debt],
    consolidation_rate,
    consolidation_term: int,
    consolidation_fee=ZERO,
) -> ConsolidationAnalysis:
    """Compare minimum-payment payoff against a single consolidation loan.

    Args:
        debts: Debts that would be consolidated.
        consolidation_rate: Annual percentage rate of the new loan.
        consolidation_term: Loan term in months.
        consolidation_fee: Origination fee added to the financed amount.

    Returns:
        ConsolidationAnalysis: Totals, monthly savings, and break-even month.

    Raises:
        ValueError: If the term is not a positive number of months.
    """
    if consolidation_term <= 0:
        raise ValueError(
            f"Consolidation term must be positive, got {consolidation_term}"
        )
    debts = list(debts)
    fee = coerce_decimal(consolidation_fee)
    current_total = sum(
        (calculate_payoff(debt, debt.minimum).total_amount for debt in debts),
        ZERO,
    )
    current_monthly = sum((debt.minimum for debt in debts), ZERO)
    financed = sum((debt.current_balance for debt in debts), ZERO) + fee

    rate = monthly_rate(coerce_decimal(consolidation_rate))
    if rate == 0:
        payment = financed / consolidation_term
    else:
        growth = (1 + rate) ** consolidation_term
        payment = financed * (rate * growth) / (growth - 1)
    consolidated_total = payment * consolidation_term
    monthly_savings = current_monthly - payment

    break_even = 0
    if fee > 0 and monthly_savings > 0:
        break_even = math.ceil(fee / monthly_savings)

    return ConsolidationAnalysis(
        current_total=current_total,
        consolidated_total=consolidated_total,
        consolidated_payment=payment,
        monthly_savings=monthly_savings,
        total_savings=current_total - consolidated_total,
        break_even_months=break_even,
    )


def apply_payment(
    debt: Debt,
    amount,
    payment_date: date,
    payment_id: str,
    is_extra_payment: bool = False,
    notes: str | None = None,
) -> tuple[DebtPayment, Debt]:
    """Split a payment into interest and principal and update the balance.

    Interest is one month of accrual on the current balance, rounded to
    cents, so ``principal + interest`` always equals ``amount``.

    Returns:
        tuple[DebtPayment, Debt]: The ledger entry and the debt with its new
        balance.

    Raises:
        ValueError: If the amount is not positive.
    """
    total = coerce_decimal(amount)
    if total <= 0:
        raise ValueError(f"Payment amount must be positive, got {total}")
    interest = quantize_money(debt.current_balance * monthly_rate(debt.rate))
    principal = total - interest
    remaining = max(ZERO, debt.current_balance - principal)
    payment = DebtPayment(
        id=payment_id,
        debt_id=debt.id,
        user_id=debt.user_id,
        payment_date=payment_date,
        amount=total,
        principal_amount=principal,
        interest_amount=interest,
        remaining_balance=remaining,
        is_extra_payment=is_extra_payment,
        notes=notes,
    )
    return payment, replace(debt, current_balance=remaining)


__all__ = [
    "monthly_rate",
    "calculate_payoff",
    "projected_payoff_date",
    "calculate_interest_savings",
    "analyze_consolidation",
    "apply_payment",
]

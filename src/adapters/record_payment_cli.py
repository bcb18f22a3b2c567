"""CLI adapter to record a payment against a debt.

Inputs come from environment variables: ``DEBT_USER_ID``, ``DEBT_ID``,
``DEBT_PAYMENT_AMOUNT``, ``DEBT_PAYMENT_DATE``, ``DEBT_PAYMENT_EXTRA`` and
``DEBT_PAYMENT_NOTES``.
"""

import os

from src.adapters.env_parsing import parse_amount, parse_date, parse_flag
from src.application.use_cases.record_debt_payment import (
    RecordDebtPaymentUseCase,
)
from src.infrastructure.container import build_debt_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Record the configured payment and print the new balance."""
    logger = get_app_logger()
    user_id = os.getenv("DEBT_USER_ID")
    debt_id = os.getenv("DEBT_ID")
    amount = parse_amount(
        os.getenv("DEBT_PAYMENT_AMOUNT"),
        "DEBT_PAYMENT_AMOUNT",
        logger,
    )
    if not user_id or not debt_id or amount is None:
        logger.warning(
            "DEBT_USER_ID, DEBT_ID and DEBT_PAYMENT_AMOUNT are required."
        )
        return

    use_case = RecordDebtPaymentUseCase(build_debt_repository(), logger=logger)
    try:
        payment = use_case.execute(
            user_id,
            debt_id,
            amount,
            payment_date=parse_date(os.getenv("DEBT_PAYMENT_DATE"), logger),
            is_extra_payment=parse_flag(os.getenv("DEBT_PAYMENT_EXTRA")),
            notes=os.getenv("DEBT_PAYMENT_NOTES") or None,
        )
    except (ValueError, RuntimeError) as exc:
        logger.error(str(exc))
        return
    print(
        f"Recorded ${payment.amount:,.2f} on {debt_id} "
        f"(principal ${payment.principal_amount:,.2f}, "
        f"interest ${payment.interest_amount:,.2f}). "
        f"Remaining balance ${payment.remaining_balance:,.2f}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()

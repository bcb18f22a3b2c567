"""SQLAlchemy-backed repository for debts, payments, and strategies.

Amounts and dates are bound as strings so the same SQL runs on SQLite and
PostgreSQL; values read back are coerced to Decimal, date and bool.
"""

import json
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debt_repository import DebtRepositoryPort
from src.domain.models import (
    Debt,
    DebtPayment,
    DebtStrategy,
    DebtType,
    StrategyType,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


CREATE_DEBTS_SQL = """
CREATE TABLE IF NOT EXISTS debts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    creditor_name TEXT NOT NULL,
    debt_type TEXT NOT NULL,
    current_balance NUMERIC(14, 2) NOT NULL,
    interest_rate NUMERIC(7, 4),
    minimum_payment NUMERIC(14, 2),
    original_amount NUMERIC(14, 2),
    due_day INTEGER,
    credit_limit NUMERIC(14, 2),
    loan_term_months INTEGER,
    notes TEXT,
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_DEBT_PAYMENTS_SQL = """
CREATE TABLE IF NOT EXISTS debt_payments (
    id TEXT PRIMARY KEY,
    debt_id TEXT NOT NULL REFERENCES debts (id),
    user_id TEXT NOT NULL,
    payment_date DATE NOT NULL,
    amount NUMERIC(14, 2) NOT NULL,
    principal_amount NUMERIC(14, 2) NOT NULL,
    interest_amount NUMERIC(14, 2) NOT NULL,
    remaining_balance NUMERIC(14, 2) NOT NULL,
    is_extra_payment BOOLEAN NOT NULL DEFAULT FALSE,
    notes TEXT
)
"""

CREATE_DEBT_STRATEGIES_SQL = """
CREATE TABLE IF NOT EXISTS debt_strategies (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    strategy_name TEXT NOT NULL,
    strategy_type TEXT NOT NULL,
    extra_payment_amount NUMERIC(14, 2),
    payment_allocation TEXT,
    is_active BOOLEAN NOT NULL DEFAULT FALSE,
    ai_metadata TEXT,
    created_at TEXT
)
"""

DEBT_COLUMNS = """
    id, user_id, creditor_name, debt_type, current_balance, interest_rate,
    minimum_payment, original_amount, due_day, credit_limit,
    loan_term_months, notes, is_active
"""

SELECT_DEBTS_SQL = text(
    f"""
    SELECT {DEBT_COLUMNS}
    FROM debts
    WHERE user_id = :user_id AND is_active = :active
    ORDER BY current_balance DESC, id
    """
)

SELECT_DEBT_SQL = text(
    f"""
    SELECT {DEBT_COLUMNS}
    FROM debts
    WHERE id = :debt_id AND user_id = :user_id AND is_active = :active
    """
)

INSERT_DEBT_SQL = text(
    """
    INSERT INTO debts (
        id, user_id, creditor_name, debt_type, current_balance,
        interest_rate, minimum_payment, original_amount, due_day,
        credit_limit, loan_term_months, notes, is_active
    )
    VALUES (
        :id, :user_id, :creditor_name, :debt_type, :current_balance,
        :interest_rate, :minimum_payment, :original_amount, :due_day,
        :credit_limit, :loan_term_months, :notes, :is_active
    )
    """
)

UPDATE_DEBT_SQL = text(
    """
    UPDATE debts
    SET creditor_name = :creditor_name,
        debt_type = :debt_type,
        current_balance = :current_balance,
        interest_rate = :interest_rate,
        minimum_payment = :minimum_payment,
        original_amount = :original_amount,
        due_day = :due_day,
        credit_limit = :credit_limit,
        loan_term_months = :loan_term_months,
        notes = :notes
    WHERE id = :id AND user_id = :user_id AND is_active = :active
    """
)

DEACTIVATE_DEBT_SQL = text(
    """
    UPDATE debts
    SET is_active = :inactive
    WHERE id = :debt_id AND user_id = :user_id
    """
)

UPDATE_BALANCE_SQL = text(
    """
    UPDATE debts
    SET current_balance = :remaining_balance
    WHERE id = :debt_id AND user_id = :user_id
    """
)

INSERT_PAYMENT_SQL = text(
    """
    INSERT INTO debt_payments (
        id, debt_id, user_id, payment_date, amount, principal_amount,
        interest_amount, remaining_balance, is_extra_payment, notes
    )
    VALUES (
        :id, :debt_id, :user_id, :payment_date, :amount, :principal_amount,
        :interest_amount, :remaining_balance, :is_extra_payment, :notes
    )
    """
)

SELECT_PAYMENTS_SQL = text(
    """
    SELECT id, debt_id, user_id, payment_date, amount, principal_amount,
           interest_amount, remaining_balance, is_extra_payment, notes
    FROM debt_payments
    WHERE debt_id = :debt_id
    ORDER BY payment_date DESC, id DESC
    """
)

STRATEGY_COLUMNS = """
    id, user_id, strategy_name, strategy_type, extra_payment_amount,
    payment_allocation, is_active, ai_metadata, created_at
"""

SELECT_STRATEGIES_SQL = text(
    f"""
    SELECT {STRATEGY_COLUMNS}
    FROM debt_strategies
    WHERE user_id = :user_id
    ORDER BY created_at DESC, id
    """
)

SELECT_STRATEGY_SQL = text(
    f"""
    SELECT {STRATEGY_COLUMNS}
    FROM debt_strategies
    WHERE id = :strategy_id AND user_id = :user_id
    """
)

INSERT_STRATEGY_SQL = text(
    """
    INSERT INTO debt_strategies (
        id, user_id, strategy_name, strategy_type, extra_payment_amount,
        payment_allocation, is_active, ai_metadata, created_at
    )
    VALUES (
        :id, :user_id, :strategy_name, :strategy_type, :extra_payment_amount,
        :payment_allocation, :is_active, :ai_metadata, :created_at
    )
    """
)

DEACTIVATE_STRATEGIES_SQL = text(
    """
    UPDATE debt_strategies
    SET is_active = :inactive
    WHERE user_id = :user_id
    """
)

ACTIVATE_STRATEGY_SQL = text(
    """
    UPDATE debt_strategies
    SET is_active = :active
    WHERE id = :strategy_id AND user_id = :user_id
    """
)


def _money(value: Decimal | None) -> str | None:
    if value is None:
        return None
    return str(value)


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _as_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _as_json(value):
    if value is None or isinstance(value, (dict, list)):
        return value
    return json.loads(value)


def _debt_params(debt: Debt) -> dict:
    return {
        "id": debt.id,
        "user_id": debt.user_id,
        "creditor_name": debt.creditor_name,
        "debt_type": DebtType(debt.debt_type).value,
        "current_balance": _money(debt.current_balance),
        "interest_rate": _money(debt.interest_rate),
        "minimum_payment": _money(debt.minimum_payment),
        "original_amount": _money(debt.original_amount),
        "due_day": debt.due_day,
        "credit_limit": _money(debt.credit_limit),
        "loan_term_months": debt.loan_term_months,
        "notes": debt.notes,
        "is_active": bool(debt.is_active),
    }


def _debt_from_row(row) -> Debt:
    return Debt(
        id=row.id,
        user_id=row.user_id,
        creditor_name=row.creditor_name,
        debt_type=DebtType(row.debt_type),
        current_balance=coerce_decimal(row.current_balance),
        interest_rate=coerce_optional_decimal(row.interest_rate),
        minimum_payment=coerce_optional_decimal(row.minimum_payment),
        original_amount=coerce_optional_decimal(row.original_amount),
        due_day=row.due_day,
        credit_limit=coerce_optional_decimal(row.credit_limit),
        loan_term_months=row.loan_term_months,
        notes=row.notes,
        is_active=bool(row.is_active),
    )


def _payment_from_row(row) -> DebtPayment:
    return DebtPayment(
        id=row.id,
        debt_id=row.debt_id,
        user_id=row.user_id,
        payment_date=_as_date(row.payment_date),
        amount=coerce_decimal(row.amount),
        principal_amount=coerce_decimal(row.principal_amount),
        interest_amount=coerce_decimal(row.interest_amount),
        remaining_balance=coerce_decimal(row.remaining_balance),
        is_extra_payment=bool(row.is_extra_payment),
        notes=row.notes,
    )


def _strategy_from_row(row) -> DebtStrategy:
    allocation = _as_json(row.payment_allocation) or {}
    return DebtStrategy(
        id=row.id,
        user_id=row.user_id,
        strategy_name=row.strategy_name,
        strategy_type=StrategyType(row.strategy_type),
        extra_payment_amount=coerce_optional_decimal(row.extra_payment_amount),
        payment_allocation={
            debt_id: int(priority) for debt_id, priority in allocation.items()
        },
        is_active=bool(row.is_active),
        ai_metadata=_as_json(row.ai_metadata),
        created_at=_as_datetime(row.created_at),
    )


def prepare_schema(db_port: DatabaseEnginePort) -> None:
    """Create the debt tables when they do not exist."""
    engine = db_port.get_engine()
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_DEBTS_SQL)
        conn.exec_driver_sql(CREATE_DEBT_PAYMENTS_SQL)
        conn.exec_driver_sql(CREATE_DEBT_STRATEGIES_SQL)


class SqlAlchemyDebtRepository(DebtRepositoryPort):
    """Repository backed by SQLAlchemy for the debts data store."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the debts engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def get_debts(self, user_id: str) -> list[Debt]:
        """Return the active debts of a user, largest balance first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_DEBTS_SQL,
                {"user_id": user_id, "active": True},
            ).all()
        return [_debt_from_row(row) for row in rows]

    def get_debt(self, debt_id: str, user_id: str) -> Debt:
        """Return one active debt of a user.

        Raises:
            RuntimeError: If the debt does not exist for the user.
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_DEBT_SQL,
                {"debt_id": debt_id, "user_id": user_id, "active": True},
            ).first()
        if row is None:
            raise RuntimeError(f"Debt {debt_id} not found for user {user_id}")
        return _debt_from_row(row)

    def create_debt(self, debt: Debt) -> Debt:
        """Insert a debt and return it."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_DEBT_SQL, _debt_params(debt))
        self._logger.info(f"Created debt {debt.id} for user {debt.user_id}")
        return debt

    def update_debt(self, debt: Debt) -> Debt:
        """Persist the editable fields of an active debt.

        Raises:
            RuntimeError: If the debt does not exist for the user.
        """
        params = _debt_params(debt)
        params.pop("is_active")
        params["active"] = True
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(UPDATE_DEBT_SQL, params)
        if result.rowcount == 0:
            raise RuntimeError(
                f"Debt {debt.id} not found for user {debt.user_id}"
            )
        return debt

    def deactivate_debt(self, debt_id: str, user_id: str) -> None:
        """Soft-delete a debt.

        Raises:
            RuntimeError: If the debt does not exist for the user.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DEACTIVATE_DEBT_SQL,
                {"debt_id": debt_id, "user_id": user_id, "inactive": False},
            )
        if result.rowcount == 0:
            raise RuntimeError(f"Debt {debt_id} not found for user {user_id}")
        self._logger.info(f"Deactivated debt {debt_id} for user {user_id}")

    def record_payment(self, payment: DebtPayment) -> DebtPayment:
        """Insert a payment and update the debt balance in one transaction.

        Raises:
            RuntimeError: If the debt does not exist for the user.
        """
        params = {
            "id": payment.id,
            "debt_id": payment.debt_id,
            "user_id": payment.user_id,
            "payment_date": payment.payment_date.isoformat(),
            "amount": _money(payment.amount),
            "principal_amount": _money(payment.principal_amount),
            "interest_amount": _money(payment.interest_amount),
            "remaining_balance": _money(payment.remaining_balance),
            "is_extra_payment": bool(payment.is_extra_payment),
            "notes": payment.notes,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_BALANCE_SQL,
                {
                    "debt_id": payment.debt_id,
                    "user_id": payment.user_id,
                    "remaining_balance": params["remaining_balance"],
                },
            )
            if result.rowcount == 0:
                raise RuntimeError(
                    f"Debt {payment.debt_id} not found for user "
                    f"{payment.user_id}"
                )
            conn.execute(INSERT_PAYMENT_SQL, params)
        return payment

    def get_payment_history(self, debt_id: str) -> list[DebtPayment]:
        """Return the payments of a debt, most recent first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_PAYMENTS_SQL,
                {"debt_id": debt_id},
            ).all()
        return [_payment_from_row(row) for row in rows]

    def get_strategies(self, user_id: str) -> list[DebtStrategy]:
        """Return the strategies of a user, newest first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_STRATEGIES_SQL,
                {"user_id": user_id},
            ).all()
        return [_strategy_from_row(row) for row in rows]

    def create_strategy(self, strategy: DebtStrategy) -> DebtStrategy:
        """Insert a strategy as the only active one of its user."""
        created_at = strategy.created_at or datetime.now()
        params = {
            "id": strategy.id,
            "user_id": strategy.user_id,
            "strategy_name": strategy.strategy_name,
            "strategy_type": StrategyType(strategy.strategy_type).value,
            "extra_payment_amount": _money(strategy.extra_payment_amount),
            "payment_allocation": json.dumps(strategy.payment_allocation),
            "is_active": True,
            "ai_metadata": (
                None
                if strategy.ai_metadata is None
                else json.dumps(strategy.ai_metadata)
            ),
            "created_at": created_at.isoformat(),
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                DEACTIVATE_STRATEGIES_SQL,
                {"user_id": strategy.user_id, "inactive": False},
            )
            conn.execute(INSERT_STRATEGY_SQL, params)
        self._logger.info(
            f"Created strategy {strategy.id} for user {strategy.user_id}"
        )
        return DebtStrategy(
            id=strategy.id,
            user_id=strategy.user_id,
            strategy_name=strategy.strategy_name,
            strategy_type=StrategyType(strategy.strategy_type),
            extra_payment_amount=strategy.extra_payment_amount,
            payment_allocation=dict(strategy.payment_allocation),
            is_active=True,
            ai_metadata=strategy.ai_metadata,
            created_at=created_at,
        )

    def activate_strategy(self, strategy_id: str, user_id: str) -> DebtStrategy:
        """Make a strategy the only active one of its user.

        The ownership check and both updates share one transaction.

        Raises:
            RuntimeError: If the strategy does not belong to the user.
        """
        keys = {"strategy_id": strategy_id, "user_id": user_id}
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            if conn.execute(SELECT_STRATEGY_SQL, keys).first() is None:
                raise RuntimeError(
                    f"Strategy {strategy_id} not found for user {user_id}"
                )
            conn.execute(
                DEACTIVATE_STRATEGIES_SQL,
                {"user_id": user_id, "inactive": False},
            )
            conn.execute(ACTIVATE_STRATEGY_SQL, {**keys, "active": True})
            row = conn.execute(SELECT_STRATEGY_SQL, keys).first()
        return _strategy_from_row(row)


__all__ = [
    "CREATE_DEBTS_SQL",
    "CREATE_DEBT_PAYMENTS_SQL",
    "CREATE_DEBT_STRATEGIES_SQL",
    "prepare_schema",
    "SqlAlchemyDebtRepository",
]

"""CLI adapter to create the debt tables."""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.debt_repository import prepare_schema
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the debts, debt_payments and debt_strategies tables."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    prepare_schema(adapter)
    logger.info("Debt schema is ready")
    print("Created tables debts, debt_payments and debt_strategies.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI adapter printing the computed budget of a month.

The target month comes from BUDGET_MONTH; when unset the current calendar
month is used. Set BUDGET_OUTPUT=json to print the month's full snapshot.
"""

from datetime import date
import json
import os

from src.domain.errors import BudgetError
from src.domain.services.months import month_from_date
from src.infrastructure.container import (
    build_budget_allocation_use_case,
    build_budget_repository,
    build_monthly_budget_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import BudgetSettings


def main() -> None:
    """Compute the monthly budget chain and print the target month."""
    logger = get_app_logger()
    settings = BudgetSettings.from_env()
    month = settings.target_month or month_from_date(date.today())
    get_usage_logger().info(
        f"monthly_budget_cli month={month} backend={settings.backend}"
    )

    try:
        repository = build_budget_repository(
            settings=settings,
            logger=logger,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    chain_use_case = build_monthly_budget_use_case(repository, logger=logger)
    allocation_use_case = build_budget_allocation_use_case(
        repository,
        logger=logger,
    )
    try:
        chain = chain_use_case.execute(month)
        allocation = allocation_use_case.execute(month)
    except BudgetError as exc:
        logger.error(f"Budget computation failed for {month}: {exc}")
        return
    except RuntimeError as exc:
        # Engine and snapshot access are deferred until the first fetch.
        logger.error(str(exc))
        return

    current = chain.current
    if current is None:
        print(f"No budget for {month}: it precedes the first income month.")
        return

    if os.getenv("BUDGET_OUTPUT", "").strip().lower() == "json":
        print(json.dumps(current.to_dict(), default=str, indent=2))
        return

    print(f"Monthly budget {month} ({len(chain.monthly_budgets)} months)")
    print(
        f"Income: {allocation.income}, budgeted: {allocation.total_budgeted}, "
        f"unallocated: {allocation.unallocated}"
    )
    for result in current.categories_monthly_budgets:
        print(
            f"{result.category.name}: budgeted={result.budgeted_amount}, "
            f"rollover_in={result.previous_month_rollover}, "
            f"spent={result.spent}, net={result.net_for_month}"
        )
    print(
        f"Totals: budgeted={current.total_budgeted_amount}, "
        f"rollover_in={current.total_previous_month_rollover}, "
        f"spent={current.total_spent}, net={current.total_net_for_month}"
    )
    print(
        f"Orphaned: transactions={len(current.orphaned_transactions)}, "
        f"cash={current.orphaned_cash_from_previous_month}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI adapter printing the statistics of a ledger.

Reads ``LEDGER_KIND`` (``current`` or ``travel``) and the optional
``LEDGER_OWNER_ID`` from the environment.
"""

import os

from finledger.infrastructure.container import build_ledger_statistics_use_case
from finledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finledger.utils.decimal_utils import quantize_currency


def main() -> None:
    """Run the statistics use case and print the totals."""
    logger = get_app_logger()
    ledger = os.getenv("LEDGER_KIND", "current").strip().lower()
    owner_id = os.getenv("LEDGER_OWNER_ID") or None
    get_usage_logger().info(f"summary ledger={ledger} owner={owner_id or 'all'}")

    try:
        use_case = build_ledger_statistics_use_case()
        stats = use_case.execute(ledger, owner_id=owner_id)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    result = stats.aggregation
    print(
        f"Ledger {stats.ledger} "
        f"({stats.account_count} accounts, owner={owner_id or 'all'})"
    )
    print(
        f"Totals: credits={quantize_currency(result.total_credits)}, "
        f"debits={quantize_currency(result.total_debits)}, "
        f"balance={quantize_currency(result.net_balance)}"
    )
    print(
        f"Month {stats.period.start:%Y-%m}: "
        f"credits={quantize_currency(result.monthly_totals.total_credits)}, "
        f"debits={quantize_currency(result.monthly_totals.total_debits)}, "
        f"balance={quantize_currency(result.monthly_totals.balance)}"
    )
    for rank in result.top_groups:
        group = result.grouped_totals[rank.label]
        print(
            f"  {rank.label}: count={rank.count}, "
            f"balance={quantize_currency(group.balance)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()

"""Domain services package."""

from .assets import compute_asset_statistics
from .boxes import carry_forward_balances, plan_next_box, sum_advances
from .dates import month_period, months_back, parse_entry_date
from .grouping import (
    count_by_label,
    rank_groups,
    rank_groups_by_value,
    resolve_group_label,
)
from .ledger import (
    aggregate,
    compute_account_balance,
    count_balance_signs,
    entry_balances,
    rank_by_absolute_balance,
    summarize_entries,
)

__all__ = [
    "aggregate",
    "compute_account_balance",
    "count_balance_signs",
    "entry_balances",
    "rank_by_absolute_balance",
    "summarize_entries",
    "carry_forward_balances",
    "plan_next_box",
    "sum_advances",
    "compute_asset_statistics",
    "month_period",
    "months_back",
    "parse_entry_date",
    "count_by_label",
    "rank_groups",
    "rank_groups_by_value",
    "resolve_group_label",
]

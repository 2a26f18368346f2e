"""Domain package for ledger rules and core models."""

from .constants import (
    DEFAULT_FALLBACK_LABEL,
    DEFAULT_STATS_TOP_LIMIT,
    DEFAULT_TOP_LIMIT,
    LEDGER_CURRENT,
    LEDGER_KINDS,
    LEDGER_TRAVEL,
)
from .models import (
    Account,
    AggregationOptions,
    AggregationResult,
    Entry,
    GroupRank,
    GroupTotals,
    LedgerTotals,
    Period,
)
from .policies import is_visible, visible_only
from .services import aggregate, carry_forward_balances, plan_next_box

__all__ = [
    "Account",
    "AggregationOptions",
    "AggregationResult",
    "Entry",
    "GroupRank",
    "GroupTotals",
    "LedgerTotals",
    "Period",
    "DEFAULT_FALLBACK_LABEL",
    "DEFAULT_STATS_TOP_LIMIT",
    "DEFAULT_TOP_LIMIT",
    "LEDGER_CURRENT",
    "LEDGER_KINDS",
    "LEDGER_TRAVEL",
    "aggregate",
    "carry_forward_balances",
    "plan_next_box",
    "is_visible",
    "visible_only",
]

"""Domain models package."""

from .assets import AssetRecord, AssetStatistics, MovementRecord
from .boxes import BoxBalance, NextBoxPlan
from .ledger import (
    Account,
    AggregationOptions,
    AggregationResult,
    BalanceSignCounts,
    Entry,
    GroupRank,
    GroupSelector,
    GroupTotals,
    GroupValue,
    LedgerTotals,
    Period,
)

__all__ = [
    "Account",
    "AggregationOptions",
    "AggregationResult",
    "BalanceSignCounts",
    "Entry",
    "GroupRank",
    "GroupSelector",
    "GroupTotals",
    "GroupValue",
    "LedgerTotals",
    "Period",
    "BoxBalance",
    "NextBoxPlan",
    "AssetRecord",
    "AssetStatistics",
    "MovementRecord",
]

"""Application use cases package."""

from .get_asset_statistics import GetAssetStatisticsUseCase
from .get_ledger_statistics import GetLedgerStatisticsUseCase, LedgerStatistics
from .get_ledger_summary import GetLedgerSummaryUseCase, LedgerSummary
from .get_next_box import GetNextBoxUseCase
from .recalculate_box_balances import (
    RecalculateBoxBalancesResult,
    RecalculateBoxBalancesUseCase,
)

__all__ = [
    "GetAssetStatisticsUseCase",
    "GetLedgerStatisticsUseCase",
    "LedgerStatistics",
    "GetLedgerSummaryUseCase",
    "LedgerSummary",
    "GetNextBoxUseCase",
    "RecalculateBoxBalancesUseCase",
    "RecalculateBoxBalancesResult",
]

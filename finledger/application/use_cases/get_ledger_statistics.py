"""Use case to compute the statistics cards of a ledger."""

from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.application.use_cases.ledger_sources import (
    DEFAULT_GROUPING,
    load_accounts,
)
from finledger.domain.constants import DEFAULT_STATS_TOP_LIMIT
from finledger.domain.models import AggregationOptions, AggregationResult, Period
from finledger.domain.services import aggregate, month_period
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerStatistics:
    """Statistics for a ledger.

    Attributes:
        ledger: Ledger kind (current or travel).
        account_count: Number of aggregated accounts.
        period: Month used for the period totals.
        aggregation: Totals, month totals and ranked groups.
    """

    ledger: str
    account_count: int
    period: Period
    aggregation: AggregationResult


class GetLedgerStatisticsUseCase:
    """Compute totals, current-month totals and top groups of a ledger."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        top_limit: int = DEFAULT_STATS_TOP_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            top_limit: Number of ranked groups returned.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit

    def execute(
        self,
        ledger: str,
        owner_id: str | None = None,
        today: date | None = None,
    ) -> LedgerStatistics:
        """Return statistics for the ledger.

        Args:
            ledger: ``current`` or ``travel``.
            owner_id: Optional user scope; None aggregates every owner.
            today: Reference day for the current month.

        Returns:
            LedgerStatistics: Aggregated statistics.
        """
        accounts = load_accounts(self._repository, ledger, owner_id)
        period = month_period(today or date.today())
        group_by, fallback_label = DEFAULT_GROUPING[ledger]
        result = aggregate(
            accounts,
            AggregationOptions(
                group_by=group_by,
                fallback_label=fallback_label,
                period=period,
                top_limit=self._top_limit,
            ),
        )
        self._logger.info(
            f"Ledger statistics computed: ledger={ledger}, "
            f"accounts={len(accounts)}, net={result.net_balance}"
        )
        return LedgerStatistics(
            ledger=ledger,
            account_count=len(accounts),
            period=period,
            aggregation=result,
        )


__all__ = ["GetLedgerStatisticsUseCase", "LedgerStatistics"]

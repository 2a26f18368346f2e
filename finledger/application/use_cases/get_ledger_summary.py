"""Use case to build the per-user summary of a ledger."""

from dataclasses import dataclass
from decimal import Decimal

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.application.use_cases.ledger_sources import (
    DEFAULT_GROUPING,
    load_accounts,
)
from finledger.domain.constants import (
    DEFAULT_TOP_LIMIT,
    LEDGER_CURRENT,
    LEDGER_TRAVEL,
    SUPPLIER_ATTRIBUTE,
)
from finledger.domain.models import (
    AggregationOptions,
    AggregationResult,
    BalanceSignCounts,
    GroupSelector,
    GroupValue,
    Period,
)
from finledger.domain.services import (
    aggregate,
    count_balance_signs,
    entry_balances,
    rank_by_absolute_balance,
    sum_advances,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSummary:
    """Summary of a user's accounts or travel boxes.

    Attributes:
        ledger: Ledger kind (current or travel).
        account_count: Number of aggregated accounts.
        aggregation: Totals, balances and group breakdowns.
        balance_signs: Accounts whose entries net positive or negative;
            previous balances are not counted.
        total_advances: Advances paid into travel boxes.
        top_suppliers: Suppliers ranked by the absolute balance of their
            current accounts; empty for travel boxes.
    """

    ledger: str
    account_count: int
    aggregation: AggregationResult
    balance_signs: BalanceSignCounts
    total_advances: Decimal
    top_suppliers: list[GroupValue]


class GetLedgerSummaryUseCase:
    """Aggregate a user's ledger grouped by a caller-chosen attribute."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        top_limit: int = DEFAULT_TOP_LIMIT,
        fallback_label: str | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            top_limit: Default number of ranked groups.
            fallback_label: Default label for accounts without a group
                value; None keeps each ledger's own label.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit
        self._fallback_label = fallback_label

    def execute(
        self,
        ledger: str,
        owner_id: str | None = None,
        group_by: GroupSelector | None = None,
        fallback_label: str | None = None,
        top_limit: int | None = None,
        period: Period | None = None,
    ) -> LedgerSummary:
        """Return the ledger summary.

        Args:
            ledger: ``current`` or ``travel``.
            owner_id: Optional user scope.
            group_by: Attribute name or callable; defaults to the ledger's
                usual grouping (type or destination).
            fallback_label: Label for accounts without a group value.
            top_limit: Number of ranked groups; defaults to the configured
                limit.
            period: Optional bounds for the period totals.

        Returns:
            LedgerSummary: Aggregation with balance sign counts.
        """
        accounts = load_accounts(self._repository, ledger, owner_id)
        limit = self._top_limit if top_limit is None else top_limit
        default_group, default_fallback = DEFAULT_GROUPING[ledger]
        result = aggregate(
            accounts,
            AggregationOptions(
                group_by=group_by or default_group,
                fallback_label=(
                    fallback_label or self._fallback_label or default_fallback
                ),
                period=period,
                top_limit=limit,
            ),
        )
        total_advances = Decimal("0")
        if ledger == LEDGER_TRAVEL:
            total_advances = sum(
                (sum_advances(box) for box in accounts),
                Decimal("0"),
            )
        top_suppliers: list[GroupValue] = []
        if ledger == LEDGER_CURRENT:
            top_suppliers = rank_by_absolute_balance(
                accounts,
                SUPPLIER_ATTRIBUTE,
                limit,
            )
        self._logger.info(
            f"Ledger summary computed: ledger={ledger}, owner={owner_id}, "
            f"accounts={len(accounts)}, groups={len(result.grouped_totals)}"
        )
        return LedgerSummary(
            ledger=ledger,
            account_count=len(accounts),
            aggregation=result,
            balance_signs=count_balance_signs(entry_balances(accounts)),
            total_advances=total_advances,
            top_suppliers=top_suppliers,
        )


__all__ = ["GetLedgerSummaryUseCase", "LedgerSummary"]

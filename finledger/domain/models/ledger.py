"""Domain models for ledger accounts and their aggregates."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Entry:
    """Single dated movement ("lançamento") of an account.

    Attributes:
        date: Entry date; raw strings from legacy rows are accepted.
        credit: Inflow amount as entered, possibly malformed.
        debit: Outflow amount as entered, possibly malformed.
        document_number: Optional document reference.
        note: Optional free-text note.
    """

    date: date | str | None = None
    credit: str | Decimal | None = None
    debit: str | Decimal | None = None
    document_number: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class Account:
    """Container of entries: a running account or a travel box.

    Attributes:
        id: Opaque identifier.
        entries: Entries of the account, in any order.
        attributes: Categorical values usable as grouping keys
            (destination, company, sector, supplier, type).
        previous_balance: Balance carried forward from a prior period.
        hidden: Soft-delete flag ("oculto"); filtered by callers.
        employee_id: Owning employee of a travel box.
        box_number: Sequential number of a travel box per employee.
        advances: Advance amounts ("adiantamentos") paid into a travel box.
    """

    id: str
    entries: tuple[Entry, ...] = ()
    attributes: Mapping[str, str | None] = field(default_factory=dict)
    previous_balance: str | Decimal | None = None
    hidden: bool = False
    employee_id: int | None = None
    box_number: int | None = None
    advances: tuple[str | Decimal | None, ...] = ()


@dataclass(frozen=True)
class Period:
    """Inclusive date range."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the range."""
        return self.start <= day <= self.end


GroupSelector = str | Callable[[Account], str | None]


@dataclass(frozen=True)
class AggregationOptions:
    """Parameters for a ledger aggregation.

    Attributes:
        group_by: Attribute name or callable returning the group label.
        fallback_label: Label used when the selector yields nothing.
        period: Optional bounds for the period totals.
        top_limit: Maximum number of ranked groups.
    """

    group_by: GroupSelector | None = None
    fallback_label: str = "OUTROS"
    period: Period | None = None
    top_limit: int = 5


@dataclass(frozen=True)
class LedgerTotals:
    """Credit and debit sums."""

    total_credits: Decimal
    total_debits: Decimal

    @property
    def balance(self) -> Decimal:
        """Return total_credits minus total_debits."""
        return self.total_credits - self.total_debits


@dataclass(frozen=True)
class GroupTotals:
    """Totals for the accounts sharing a group label."""

    label: str
    count: int
    total_credits: Decimal
    total_debits: Decimal

    @property
    def balance(self) -> Decimal:
        """Return total_credits minus total_debits."""
        return self.total_credits - self.total_debits


@dataclass(frozen=True)
class GroupRank:
    """Group label with its number of accounts."""

    label: str
    count: int


@dataclass(frozen=True)
class GroupValue:
    """Group label with an accumulated amount and its number of accounts."""

    label: str
    value: Decimal
    count: int


@dataclass(frozen=True)
class AggregationResult:
    """Output of a ledger aggregation.

    Attributes:
        total_credits: Sum of credits across all accounts.
        total_debits: Sum of debits across all accounts.
        net_balance: total_credits minus total_debits.
        per_account_balance: Balance of each account keyed by id.
        grouped_totals: Totals per group label, in first-seen order.
        monthly_totals: Totals restricted to the requested period.
        top_groups: Group labels ranked by account count.
    """

    total_credits: Decimal
    total_debits: Decimal
    net_balance: Decimal
    per_account_balance: dict[str, Decimal]
    grouped_totals: dict[str, GroupTotals]
    monthly_totals: LedgerTotals
    top_groups: list[GroupRank]


@dataclass(frozen=True)
class BalanceSignCounts:
    """Number of accounts by balance sign."""

    positive: int
    negative: int
    total: int


__all__ = [
    "Entry",
    "Account",
    "Period",
    "GroupSelector",
    "AggregationOptions",
    "LedgerTotals",
    "GroupTotals",
    "GroupRank",
    "GroupValue",
    "AggregationResult",
    "BalanceSignCounts",
]

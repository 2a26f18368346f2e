"""Domain services for ledger aggregates.

Amounts and dates come from user-entered records and may be malformed.
Unparseable amounts count as zero and unparseable dates only drop the entry
from period totals, so none of these functions raise on dirty data.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from finledger.domain.models import (
    Account,
    AggregationOptions,
    AggregationResult,
    BalanceSignCounts,
    Entry,
    GroupTotals,
    GroupValue,
    LedgerTotals,
    Period,
)
from finledger.domain.services.dates import parse_entry_date
from finledger.domain.services.grouping import (
    rank_groups,
    rank_groups_by_value,
    resolve_group_label,
)
from finledger.utils.decimal_utils import parse_amount

_ZERO = Decimal("0")


def summarize_entries(
    entries: Iterable[Entry],
    period: Period | None = None,
) -> LedgerTotals:
    """Sum credits and debits of entries.

    Args:
        entries: Entries to sum.
        period: Optional bounds; entries outside it, or with an unusable
            date, are skipped.

    Returns:
        LedgerTotals: Credit and debit sums.
    """
    credits = _ZERO
    debits = _ZERO
    for entry in entries:
        if period is not None:
            day = parse_entry_date(entry.date)
            if day is None or not period.contains(day):
                continue
        credits += parse_amount(entry.credit) or _ZERO
        debits += parse_amount(entry.debit) or _ZERO
    return LedgerTotals(total_credits=credits, total_debits=debits)


def compute_account_balance(account: Account) -> Decimal:
    """Return credits minus debits plus the carried-forward balance."""
    totals = summarize_entries(account.entries)
    previous = parse_amount(account.previous_balance) or _ZERO
    return totals.balance + previous


def aggregate(
    accounts: Sequence[Account],
    options: AggregationOptions | None = None,
) -> AggregationResult:
    """Aggregate accounts into totals, balances and group breakdowns.

    Args:
        accounts: Accounts already filtered for visibility and scope.
        options: Grouping, period and ranking parameters.

    Returns:
        AggregationResult: Grand totals, per-account balances, per-group
        totals, period totals and ranked groups.
    """
    options = options or AggregationOptions()
    total_credits = _ZERO
    total_debits = _ZERO
    period_credits = _ZERO
    period_debits = _ZERO
    per_account: dict[str, Decimal] = {}
    groups: dict[str, GroupTotals] = {}

    for account in accounts:
        totals = summarize_entries(account.entries)
        total_credits += totals.total_credits
        total_debits += totals.total_debits

        if options.period is None:
            period_totals = totals
        else:
            period_totals = summarize_entries(account.entries, options.period)
        period_credits += period_totals.total_credits
        period_debits += period_totals.total_debits

        previous = parse_amount(account.previous_balance) or _ZERO
        per_account[account.id] = (
            per_account.get(account.id, _ZERO) + totals.balance + previous
        )

        label = resolve_group_label(
            account,
            options.group_by,
            options.fallback_label,
        )
        current = groups.get(label)
        if current is None:
            groups[label] = GroupTotals(
                label=label,
                count=1,
                total_credits=totals.total_credits,
                total_debits=totals.total_debits,
            )
        else:
            groups[label] = GroupTotals(
                label=label,
                count=current.count + 1,
                total_credits=current.total_credits + totals.total_credits,
                total_debits=current.total_debits + totals.total_debits,
            )

    counts = {label: group.count for label, group in groups.items()}
    return AggregationResult(
        total_credits=total_credits,
        total_debits=total_debits,
        net_balance=total_credits - total_debits,
        per_account_balance=per_account,
        grouped_totals=groups,
        monthly_totals=LedgerTotals(
            total_credits=period_credits,
            total_debits=period_debits,
        ),
        top_groups=rank_groups(counts, options.top_limit),
    )


def count_balance_signs(balances: Mapping[str, Decimal]) -> BalanceSignCounts:
    """Count balances above and below zero."""
    positive = sum(1 for value in balances.values() if value > 0)
    negative = sum(1 for value in balances.values() if value < 0)
    return BalanceSignCounts(
        positive=positive,
        negative=negative,
        total=len(balances),
    )


def entry_balances(accounts: Iterable[Account]) -> dict[str, Decimal]:
    """Return credits minus debits per account id, ignoring previous balances.

    Accounts sharing an id are summed.
    """
    balances: dict[str, Decimal] = {}
    for account in accounts:
        balance = summarize_entries(account.entries).balance
        balances[account.id] = balances.get(account.id, _ZERO) + balance
    return balances


def rank_by_absolute_balance(
    accounts: Iterable[Account],
    attribute: str,
    limit: int,
) -> list[GroupValue]:
    """Rank attribute values by the summed absolute entry balance.

    Accounts without a value for ``attribute`` are left out rather than
    grouped under a fallback label.

    Args:
        accounts: Accounts already filtered for visibility and scope.
        attribute: Account attribute naming the group, e.g. ``supplier``.
        limit: Maximum number of ranks returned.

    Returns:
        list[GroupValue]: Labels with their absolute balance sum and
        account count, largest first; ties keep first-seen order.
    """
    values: dict[str, tuple[Decimal, int]] = {}
    for account in accounts:
        raw = account.attributes.get(attribute)
        label = str(raw).strip() if raw is not None else ""
        if not label:
            continue
        balance = abs(summarize_entries(account.entries).balance)
        value, count = values.get(label, (_ZERO, 0))
        values[label] = (value + balance, count + 1)
    return rank_groups_by_value(values, limit)


__all__ = [
    "summarize_entries",
    "compute_account_balance",
    "aggregate",
    "count_balance_signs",
    "entry_balances",
    "rank_by_absolute_balance",
]

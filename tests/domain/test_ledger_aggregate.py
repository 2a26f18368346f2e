"""Tests for the ledger aggregation service."""

from datetime import date
from decimal import Decimal

from finledger.domain.models import (
    Account,
    AggregationOptions,
    Entry,
    Period,
)
from finledger.domain.services.ledger import (
    aggregate,
    compute_account_balance,
    count_balance_signs,
    entry_balances,
    rank_by_absolute_balance,
    summarize_entries,
)

MARCH = Period(start=date(2024, 3, 1), end=date(2024, 3, 31))


def _account(account_id: str, *entries: Entry, **kwargs) -> Account:
    return Account(id=account_id, entries=tuple(entries), **kwargs)


def test_aggregate_empty_accounts_returns_zero_result() -> None:
    """An empty account list yields zero totals and empty groupings."""
    result = aggregate([], AggregationOptions(group_by="destination"))

    assert result.total_credits == Decimal("0")
    assert result.total_debits == Decimal("0")
    assert result.net_balance == Decimal("0")
    assert result.per_account_balance == {}
    assert result.grouped_totals == {}
    assert result.top_groups == []
    assert result.monthly_totals.total_credits == Decimal("0")
    assert result.monthly_totals.total_debits == Decimal("0")


def test_aggregate_three_account_scenario() -> None:
    """Totals and balances match the reference three-account scenario."""
    accounts = [
        _account(
            "Account1",
            Entry(date=date(2024, 3, 1), credit="100.00"),
            Entry(date=date(2024, 3, 2), debit="30.00"),
        ),
        _account(
            "Account2",
            Entry(date=date(2024, 3, 3), credit="50.50"),
            previous_balance=Decimal("20"),
        ),
        _account("Account3"),
    ]

    result = aggregate(accounts)

    assert result.total_credits == Decimal("150.50")
    assert result.total_debits == Decimal("30.00")
    assert result.net_balance == Decimal("120.50")
    assert result.per_account_balance == {
        "Account1": Decimal("70.00"),
        "Account2": Decimal("70.50"),
        "Account3": Decimal("0"),
    }


def test_per_account_balance_is_independent_of_entry_order() -> None:
    """Reordering entries does not change the account balance."""
    entries = [
        Entry(credit="10.10"),
        Entry(debit="3.03"),
        Entry(credit="0.01", debit="7"),
    ]
    forward = aggregate([_account("a", *entries, previous_balance="5")])
    backward = aggregate(
        [_account("a", *reversed(entries), previous_balance="5")]
    )

    expected = Decimal("10.11") - Decimal("10.03") + Decimal("5")
    assert forward.per_account_balance["a"] == expected
    assert backward.per_account_balance["a"] == expected


def test_total_credits_equal_sum_of_account_credits() -> None:
    """Grouping neither loses nor double-counts entries."""
    accounts = [
        _account("a", Entry(credit="1.10"), attributes={"destination": "X"}),
        _account("b", Entry(credit="2.20"), attributes={"destination": "Y"}),
        _account("c", Entry(credit="3.30"), attributes={"destination": "X"}),
    ]

    result = aggregate(accounts, AggregationOptions(group_by="destination"))

    per_account = sum(
        (summarize_entries(account.entries).total_credits for account in accounts),
        Decimal("0"),
    )
    grouped = sum(
        (group.total_credits for group in result.grouped_totals.values()),
        Decimal("0"),
    )
    assert result.total_credits == per_account == grouped == Decimal("6.60")


def test_non_numeric_credit_contributes_zero() -> None:
    """Malformed amounts count as zero and never raise."""
    accounts = [
        _account(
            "a",
            Entry(credit="abc"),
            Entry(credit=""),
            Entry(debit="NaN"),
            Entry(debit="12,50"),
            Entry(credit="4"),
        )
    ]

    result = aggregate(accounts)

    assert result.total_credits == Decimal("4")
    assert result.total_debits == Decimal("0")
    assert result.per_account_balance["a"] == Decimal("4")


def test_entry_with_credit_and_debit_counts_both() -> None:
    """A correction line feeds both sums in the same pass."""
    result = aggregate([_account("a", Entry(credit="100", debit="40"))])

    assert result.total_credits == Decimal("100")
    assert result.total_debits == Decimal("40")
    assert result.net_balance == Decimal("60")


def test_entry_without_amounts_is_a_noop() -> None:
    """Entries with neither credit nor debit leave totals unchanged."""
    result = aggregate([_account("a", Entry(note="memo"), Entry(credit="1"))])

    assert result.total_credits == Decimal("1")
    assert result.total_debits == Decimal("0")


def test_monthly_totals_respect_period_bounds() -> None:
    """Entries outside the period are excluded from monthly totals."""
    accounts = [
        _account(
            "a",
            Entry(date=date(2024, 2, 28), credit="10"),
            Entry(date=date(2024, 3, 15), credit="20"),
            Entry(date="2024-03-31T23:00:00.000Z", debit="5"),
            Entry(date="2024-04-01", debit="7"),
        )
    ]

    result = aggregate(accounts, AggregationOptions(period=MARCH))

    assert result.monthly_totals.total_credits == Decimal("20")
    assert result.monthly_totals.total_debits == Decimal("5")
    assert result.total_credits == Decimal("30")
    assert result.total_debits == Decimal("12")


def test_malformed_dates_only_leave_the_period_bucket() -> None:
    """Unparseable dates are still counted in grand totals."""
    accounts = [
        _account(
            "a",
            Entry(date="not-a-date", credit="10"),
            Entry(date=None, debit="2"),
            Entry(date="2024-13-45", credit="1"),
            Entry(date=date(2024, 3, 10), credit="3"),
        )
    ]

    result = aggregate(accounts, AggregationOptions(period=MARCH))

    assert result.total_credits == Decimal("14")
    assert result.total_debits == Decimal("2")
    assert result.monthly_totals.total_credits == Decimal("3")
    assert result.monthly_totals.total_debits == Decimal("0")


def test_monthly_totals_default_to_grand_totals() -> None:
    """Without a period the monthly totals equal the grand totals."""
    result = aggregate(
        [_account("a", Entry(date="garbage", credit="9", debit="1"))]
    )

    assert result.monthly_totals.total_credits == Decimal("9")
    assert result.monthly_totals.total_debits == Decimal("1")


def test_grouped_totals_use_fallback_label() -> None:
    """Missing or blank labels are bucketed under the fallback label."""
    accounts = [
        _account("a", Entry(credit="10"), attributes={"destination": "Recife"}),
        _account("b", Entry(debit="4"), attributes={"destination": "  "}),
        _account("c", Entry(credit="1")),
        _account("d", Entry(credit="2"), attributes={"destination": " Recife "}),
    ]

    result = aggregate(
        accounts,
        AggregationOptions(group_by="destination", fallback_label="OUTROS"),
    )

    assert list(result.grouped_totals) == ["Recife", "OUTROS"]
    recife = result.grouped_totals["Recife"]
    assert recife.count == 2
    assert recife.total_credits == Decimal("12")
    others = result.grouped_totals["OUTROS"]
    assert others.count == 2
    assert others.total_debits == Decimal("4")
    assert others.balance == Decimal("-3")


def test_group_by_accepts_callable() -> None:
    """A callable selector can derive labels from the account."""
    accounts = [
        _account("a", employee_id=1),
        _account("b", employee_id=2),
        _account("c"),
    ]

    result = aggregate(
        accounts,
        AggregationOptions(
            group_by=lambda account: (
                f"emp-{account.employee_id}" if account.employee_id else None
            ),
            fallback_label="none",
        ),
    )

    assert list(result.grouped_totals) == ["emp-1", "emp-2", "none"]


def test_top_groups_break_ties_by_first_seen_order() -> None:
    """Equal counts keep the order in which labels first appeared."""
    labels = ["D", "B", "A", "C", "A", "B", "A", "C", "A", "B", "A", "C"]
    accounts = [
        _account(str(index), attributes={"destination": label})
        for index, label in enumerate(labels)
    ]

    result = aggregate(
        accounts,
        AggregationOptions(group_by="destination", top_limit=2),
    )

    assert [(rank.label, rank.count) for rank in result.top_groups] == [
        ("A", 5),
        ("B", 3),
    ]


def test_top_groups_default_limit_is_five() -> None:
    """Rankings are truncated to five groups by default."""
    accounts = [
        _account(str(index), attributes={"destination": f"city-{index}"})
        for index in range(8)
    ]

    result = aggregate(accounts, AggregationOptions(group_by="destination"))

    assert len(result.top_groups) == 5
    assert result.top_groups[0].label == "city-0"


def test_balances_are_never_clamped() -> None:
    """Negative balances are reported as such."""
    result = aggregate([_account("a", Entry(debit="25.75"))])

    assert result.net_balance == Decimal("-25.75")
    assert result.per_account_balance["a"] == Decimal("-25.75")


def test_malformed_previous_balance_counts_as_zero() -> None:
    """A garbage carried-forward balance does not break the account."""
    account = _account("a", Entry(credit="3"), previous_balance="n/a")

    assert compute_account_balance(account) == Decimal("3")


def test_aggregate_does_not_mutate_inputs() -> None:
    """Accounts and entries are left untouched."""
    entries = (Entry(credit="1"),)
    accounts = [Account(id="a", entries=entries)]

    aggregate(accounts, AggregationOptions(period=MARCH))

    assert accounts == [Account(id="a", entries=entries)]


def test_count_balance_signs() -> None:
    """Zero balances count toward the total only."""
    counts = count_balance_signs(
        {"a": Decimal("1"), "b": Decimal("-2"), "c": Decimal("0")}
    )

    assert counts.positive == 1
    assert counts.negative == 1
    assert counts.total == 3


def test_huge_exponent_amounts_do_not_overflow() -> None:
    """Oversized amounts count as zero instead of raising Overflow."""
    account = _account(
        "a",
        Entry(credit="1E+1000000"),
        Entry(credit="5"),
        Entry(debit="-9E+999999"),
        Entry(debit="1E-1000000"),
        previous_balance="1E+999999",
    )

    result = aggregate([account, account], AggregationOptions(period=MARCH))

    assert result.total_credits == Decimal("10")
    assert result.per_account_balance["a"] < Decimal("10.01")
    assert compute_account_balance(account) < Decimal("5.01")


def test_entry_balances_leave_out_previous_balance() -> None:
    """Entry balances are credits minus debits only."""
    balances = entry_balances(
        [
            _account("a", Entry(credit="10"), previous_balance="-100"),
            _account("b", Entry(debit="4")),
            _account("a", Entry(credit="1")),
        ]
    )

    assert balances == {"a": Decimal("11"), "b": Decimal("-4")}


def test_rank_by_absolute_balance_skips_accounts_without_attribute() -> None:
    """Negative balances count by magnitude and blank suppliers are skipped."""
    accounts = [
        _account("a", Entry(debit="70"), attributes={"supplier": "Beta"}),
        _account("b", Entry(credit="50"), attributes={"supplier": "Alfa"}),
        _account("c", Entry(credit="30"), attributes={"supplier": " Beta "}),
        _account("d", Entry(credit="999"), attributes={"supplier": None}),
        _account("e", Entry(credit="999")),
    ]

    ranks = rank_by_absolute_balance(accounts, "supplier", 5)

    assert [(rank.label, rank.value, rank.count) for rank in ranks] == [
        ("Beta", Decimal("100"), 2),
        ("Alfa", Decimal("50"), 1),
    ]

"""Grouping and ranking helpers."""

from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import TypeVar

from finledger.domain.models import Account, GroupRank, GroupSelector, GroupValue

T = TypeVar("T")


def resolve_group_label(
    account: Account,
    group_by: GroupSelector | None,
    fallback_label: str,
) -> str:
    """Return the group label for an account.

    Args:
        account: Account being grouped.
        group_by: Attribute name or callable selecting the label.
        fallback_label: Label used when the selection is empty.

    Returns:
        str: Stripped label, or the fallback label.
    """
    if group_by is None:
        return fallback_label
    if callable(group_by):
        raw = group_by(account)
    else:
        raw = account.attributes.get(group_by)
    return _clean_label(raw, fallback_label)


def count_by_label(
    items: Iterable[T],
    selector: Callable[[T], str | None],
    fallback_label: str,
) -> dict[str, int]:
    """Count items per label, keeping first-seen label order."""
    counts: dict[str, int] = {}
    for item in items:
        label = _clean_label(selector(item), fallback_label)
        counts[label] = counts.get(label, 0) + 1
    return counts


def rank_groups(counts: Mapping[str, int], limit: int) -> list[GroupRank]:
    """Rank labels by descending count.

    Ties keep the insertion order of ``counts``, i.e. the order in which the
    labels were first encountered.

    Args:
        counts: Count per label in first-seen order.
        limit: Maximum number of ranks returned.

    Returns:
        list[GroupRank]: At most ``limit`` ranks.
    """
    if limit <= 0:
        return []
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [GroupRank(label=label, count=count) for label, count in ordered[:limit]]


def rank_groups_by_value(
    values: Mapping[str, tuple[Decimal, int]],
    limit: int,
) -> list[GroupValue]:
    """Rank labels by descending accumulated value.

    Args:
        values: (value, count) per label in first-seen order.
        limit: Maximum number of ranks returned.

    Returns:
        list[GroupValue]: At most ``limit`` ranks; equal values keep the
        order of ``values``.
    """
    if limit <= 0:
        return []
    ordered = sorted(values.items(), key=lambda item: -item[1][0])
    return [
        GroupValue(label=label, value=value, count=count)
        for label, (value, count) in ordered[:limit]
    ]


def _clean_label(raw, fallback_label: str) -> str:
    if raw is None:
        return fallback_label
    label = str(raw).strip()
    return label or fallback_label


__all__ = [
    "resolve_group_label",
    "count_by_label",
    "rank_groups",
    "rank_groups_by_value",
]

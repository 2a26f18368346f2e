"""Carry-forward balances for sequential travel boxes."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from finledger.domain.models import Account, BoxBalance, NextBoxPlan
from finledger.domain.services.ledger import summarize_entries
from finledger.utils.decimal_utils import parse_amount

_ZERO = Decimal("0")


def sum_advances(box: Account) -> Decimal:
    """Return the sum of a box's advances, skipping malformed values."""
    return sum(
        (parse_amount(value) or _ZERO for value in box.advances),
        _ZERO,
    )


def carry_forward_balances(boxes: Iterable[Account]) -> list[BoxBalance]:
    """Chain box balances per employee in box-number order.

    The first box of each employee keeps its stored previous balance; every
    later box opens with the ending balance of the box before it. Advances
    count as inflow. Boxes without an employee are skipped.

    Args:
        boxes: Travel boxes of one or more employees.

    Returns:
        list[BoxBalance]: Balances grouped by employee (first-seen order),
        each group ordered by box number.
    """
    by_employee: dict[int, list[Account]] = {}
    for box in boxes:
        if box.employee_id is None:
            continue
        by_employee.setdefault(box.employee_id, []).append(box)

    results: list[BoxBalance] = []
    for employee_id, employee_boxes in by_employee.items():
        ordered = sorted(employee_boxes, key=lambda box: box.box_number or 0)
        carried: Decimal | None = None
        for box in ordered:
            stored = parse_amount(box.previous_balance) or _ZERO
            totals = summarize_entries(box.entries)
            balance = BoxBalance(
                box_id=box.id,
                employee_id=employee_id,
                box_number=box.box_number,
                stored_previous_balance=stored,
                previous_balance=stored if carried is None else carried,
                total_credits=totals.total_credits,
                total_debits=totals.total_debits,
                total_advances=sum_advances(box),
            )
            carried = balance.ending_balance
            results.append(balance)
    return results


def plan_next_box(boxes: Sequence[Account], employee_id: int) -> NextBoxPlan:
    """Return the number and opening balance of an employee's next box.

    Args:
        boxes: Visible travel boxes; boxes of other employees are ignored.
        employee_id: Employee owning the new box.

    Returns:
        NextBoxPlan: Next number (1 without prior boxes) and the last box's
        ending balance as opening balance.
    """
    own = [box for box in boxes if box.employee_id == employee_id]
    if not own:
        return NextBoxPlan(
            employee_id=employee_id,
            next_number=1,
            previous_balance=_ZERO,
        )
    last = max(own, key=lambda box: box.box_number or 0)
    totals = summarize_entries(last.entries)
    stored = parse_amount(last.previous_balance) or _ZERO
    ending = stored + totals.total_credits + sum_advances(last) - totals.total_debits
    return NextBoxPlan(
        employee_id=employee_id,
        next_number=(last.box_number or 0) + 1,
        previous_balance=ending,
        last_box_id=last.id,
        last_box_number=last.box_number,
    )


__all__ = ["sum_advances", "carry_forward_balances", "plan_next_box"]

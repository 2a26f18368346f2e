"""Tests for the GetNextBoxUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from finledger.application.use_cases.get_next_box import GetNextBoxUseCase
from finledger.domain.models import Account, Entry


def test_execute_plans_next_box_from_visible_boxes() -> None:
    """Hidden boxes are ignored when numbering the next box."""
    repository = MagicMock()
    repository.fetch_travel_boxes.return_value = [
        Account(
            id="b1",
            entries=(Entry(credit="40"),),
            previous_balance="10",
            employee_id=2,
            box_number=1,
        ),
        Account(id="b2", employee_id=2, box_number=2, hidden=True),
    ]

    use_case = GetNextBoxUseCase(repository, logger=MagicMock())
    plan = use_case.execute(2)

    repository.fetch_travel_boxes.assert_called_once_with(employee_id=2)
    assert plan.next_number == 2
    assert plan.previous_balance == Decimal("50")
    assert plan.last_box_id == "b1"

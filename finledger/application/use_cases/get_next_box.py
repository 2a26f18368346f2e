"""Use case to plan an employee's next travel box."""

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import NextBoxPlan
from finledger.domain.policies import visible_only
from finledger.domain.services import plan_next_box
from finledger.infrastructure.logging.logger import get_app_logger


class GetNextBoxUseCase:
    """Return the next box number and its opening balance."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, employee_id: int) -> NextBoxPlan:
        """Plan the next travel box of an employee.

        Args:
            employee_id: Employee owning the boxes.

        Returns:
            NextBoxPlan: Next number and opening balance.
        """
        boxes = visible_only(
            self._repository.fetch_travel_boxes(employee_id=employee_id)
        )
        plan = plan_next_box(boxes, employee_id)
        self._logger.info(
            f"Next travel box for employee={employee_id}: "
            f"number={plan.next_number}, opening={plan.previous_balance}"
        )
        return plan


__all__ = ["GetNextBoxUseCase"]

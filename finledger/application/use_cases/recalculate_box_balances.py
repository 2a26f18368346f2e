"""Use case to chain travel box balances and persist the carry-forward."""

from dataclasses import dataclass

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import BoxBalance
from finledger.domain.policies import visible_only
from finledger.domain.services import carry_forward_balances
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RecalculateBoxBalancesResult:
    """Result of a travel box recalculation.

    Attributes:
        boxes: Recomputed balances, grouped per employee.
        updated_count: Number of boxes whose previous balance was rewritten.
    """

    boxes: list[BoxBalance]
    updated_count: int


class RecalculateBoxBalancesUseCase:
    """Recompute the previous balance of every travel box in sequence."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing and persisting travel boxes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        employee_id: int | None = None,
    ) -> RecalculateBoxBalancesResult:
        """Recalculate balances for one employee or for all of them.

        Args:
            employee_id: Optional employee filter.

        Returns:
            RecalculateBoxBalancesResult: Balances and update count.
        """
        boxes = visible_only(
            self._repository.fetch_travel_boxes(employee_id=employee_id)
        )
        if not boxes:
            self._logger.info("No travel boxes found for recalculation")
            return RecalculateBoxBalancesResult(boxes=[], updated_count=0)

        balances = carry_forward_balances(boxes)
        updated = 0
        for balance in balances:
            if not balance.changed:
                continue
            self._repository.update_previous_balance(
                balance.box_id,
                balance.previous_balance,
            )
            updated += 1
        self._logger.info(
            f"Recalculated {len(balances)} travel boxes, "
            f"updated {updated} previous balances"
        )
        return RecalculateBoxBalancesResult(
            boxes=balances,
            updated_count=updated,
        )


__all__ = ["RecalculateBoxBalancesUseCase", "RecalculateBoxBalancesResult"]

"""Domain models for sequential travel boxes."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class BoxBalance:
    """Recomputed balance of a travel box ("caixa de viagem").

    Attributes:
        box_id: Travel box identifier.
        employee_id: Owning employee.
        box_number: Sequential number of the box for the employee.
        stored_previous_balance: Previous balance before recalculation.
        previous_balance: Previous balance after carry-forward.
        total_credits: Sum of entry credits.
        total_debits: Sum of entry debits.
        total_advances: Sum of advances paid into the box.
    """

    box_id: str
    employee_id: int
    box_number: int | None
    stored_previous_balance: Decimal
    previous_balance: Decimal
    total_credits: Decimal
    total_debits: Decimal
    total_advances: Decimal

    @property
    def ending_balance(self) -> Decimal:
        """Return the balance carried into the next box."""
        return (
            self.previous_balance
            + self.total_credits
            + self.total_advances
            - self.total_debits
        )

    @property
    def changed(self) -> bool:
        """Return True when the carry-forward altered the stored value."""
        return self.previous_balance != self.stored_previous_balance


@dataclass(frozen=True)
class NextBoxPlan:
    """Numbering and opening balance for an employee's next travel box."""

    employee_id: int
    next_number: int
    previous_balance: Decimal
    last_box_id: str | None = None
    last_box_number: int | None = None


__all__ = ["BoxBalance", "NextBoxPlan"]

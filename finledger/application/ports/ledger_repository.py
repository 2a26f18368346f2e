"""Port for ledger, travel box and patrimony reads."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from finledger.domain.models import Account, AssetRecord, MovementRecord


class LedgerRepositoryPort(Protocol):
    """Port exposing the records needed for ledger computations.

    Implementations return only visible records and apply owner scoping.
    """

    def fetch_current_accounts(
        self,
        owner_id: str | None = None,
    ) -> list[Account]:
        """Return running accounts with their entries."""

    def fetch_travel_boxes(
        self,
        owner_id: str | None = None,
        employee_id: int | None = None,
    ) -> list[Account]:
        """Return travel boxes with their entries and advances."""

    def update_previous_balance(self, box_id: str, value: Decimal) -> None:
        """Persist the carried-forward balance of a travel box."""

    def fetch_assets(self) -> list[AssetRecord]:
        """Return tracked assets."""

    def fetch_movements(self, since: date | None = None) -> list[MovementRecord]:
        """Return asset movements created on or after ``since``."""


__all__ = ["LedgerRepositoryPort"]

"""Shared record loading for ledger use cases."""

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.constants import (
    DEFAULT_FALLBACK_LABEL,
    LEDGER_CURRENT,
    LEDGER_KINDS,
    LEDGER_TRAVEL,
    NO_DESTINATION_LABEL,
)
from finledger.domain.models import Account
from finledger.domain.policies import visible_only

# Default grouping attribute and fallback label per ledger kind.
DEFAULT_GROUPING = {
    LEDGER_CURRENT: ("type", DEFAULT_FALLBACK_LABEL),
    LEDGER_TRAVEL: ("destination", NO_DESTINATION_LABEL),
}


def validate_ledger(ledger: str) -> str:
    """Return the ledger kind or raise for unknown values.

    Raises:
        ValueError: If ``ledger`` is not a known ledger kind.
    """
    if ledger not in LEDGER_KINDS:
        raise ValueError(
            f"Unknown ledger '{ledger}'. Expected one of {LEDGER_KINDS}."
        )
    return ledger


def load_accounts(
    repository: LedgerRepositoryPort,
    ledger: str,
    owner_id: str | None,
) -> list[Account]:
    """Fetch the visible accounts of a ledger.

    Args:
        repository: Port providing ledger records.
        ledger: ``current`` or ``travel``.
        owner_id: Optional user scope.

    Returns:
        list[Account]: Visible accounts or travel boxes.
    """
    validate_ledger(ledger)
    if ledger == LEDGER_TRAVEL:
        accounts = repository.fetch_travel_boxes(owner_id=owner_id)
    else:
        accounts = repository.fetch_current_accounts(owner_id=owner_id)
    return visible_only(accounts)


__all__ = ["DEFAULT_GROUPING", "validate_ledger", "load_accounts"]

"""Settings helpers for ledger use cases and adapters."""

from dataclasses import dataclass
import os

from finledger.domain.constants import (
    DEFAULT_STATS_TOP_LIMIT,
    DEFAULT_TOP_LIMIT,
)
from finledger.infrastructure.logging.logger import get_app_logger


def read_int_env(name: str, default: int, logger) -> int:
    """Read a non-negative integer variable.

    Args:
        name: Environment variable name.
        default: Value used when missing or invalid.
        logger: Logger used for warnings.

    Returns:
        int: Parsed value or the default.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid integer for {name}: '{raw}'")
        return default
    if value < 0:
        logger.warning(f"Negative value for {name}: {value}")
        return default
    return value


@dataclass(frozen=True)
class LedgerSettings:
    """Tunable parameters for ledger summaries.

    Attributes:
        top_limit: Ranking size for per-user summaries.
        stats_top_limit: Ranking size for statistics cards.
        fallback_label: Label for accounts without a group value; None keeps
            each ledger's own default.
        asset_window_months: Trailing months of asset movements counted.
    """

    top_limit: int = DEFAULT_TOP_LIMIT
    stats_top_limit: int = DEFAULT_STATS_TOP_LIMIT
    fallback_label: str | None = None
    asset_window_months: int = 6

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        fallback_label = os.getenv("LEDGER_FALLBACK_LABEL", "").strip() or None
        return cls(
            top_limit=read_int_env(
                "LEDGER_TOP_LIMIT", DEFAULT_TOP_LIMIT, logger
            ),
            stats_top_limit=read_int_env(
                "LEDGER_STATS_TOP_LIMIT", DEFAULT_STATS_TOP_LIMIT, logger
            ),
            fallback_label=fallback_label,
            asset_window_months=read_int_env(
                "LEDGER_ASSET_WINDOW_MONTHS", 6, logger
            ),
        )


__all__ = ["LedgerSettings", "read_int_env"]

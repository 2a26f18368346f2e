"""Use case to compute patrimony chart statistics."""

from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.constants import NO_SECTOR_LABEL
from finledger.domain.models import AssetStatistics
from finledger.domain.policies import visible_only
from finledger.domain.services import compute_asset_statistics, months_back
from finledger.infrastructure.logging.logger import get_app_logger


class GetAssetStatisticsUseCase:
    """Count assets by type and sector and recent movements by month."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        window_months: int = 6,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing assets and movements.
            logger: Optional logger compatible with logging.Logger-like API.
            window_months: Number of trailing months of movements counted.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._window_months = window_months

    def execute(self, today: date | None = None) -> AssetStatistics:
        """Return patrimony statistics.

        Args:
            today: Reference day for the movement window.

        Returns:
            AssetStatistics: Counts by type, sector and month.
        """
        since = months_back(today or date.today(), self._window_months)
        assets = visible_only(self._repository.fetch_assets())
        movements = self._repository.fetch_movements(since=since)
        stats = compute_asset_statistics(
            assets,
            movements,
            since=since,
            sector_fallback=NO_SECTOR_LABEL,
        )
        self._logger.info(
            f"Asset statistics computed: assets={len(assets)}, "
            f"movements={sum(stats.movements_by_month.values())}"
        )
        return stats


__all__ = ["GetAssetStatisticsUseCase"]

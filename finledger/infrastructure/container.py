"""Composition root for wiring infrastructure adapters."""

from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.application.use_cases import (
    GetAssetStatisticsUseCase,
    GetLedgerStatisticsUseCase,
    GetLedgerSummaryUseCase,
    GetNextBoxUseCase,
    RecalculateBoxBalancesUseCase,
)
from finledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finledger.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_ledger_statistics_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetLedgerStatisticsUseCase:
    """Return the statistics use case configured from the environment."""
    settings = LedgerSettings.from_env()
    return GetLedgerStatisticsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        top_limit=settings.stats_top_limit,
    )


def build_ledger_summary_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetLedgerSummaryUseCase:
    """Return the summary use case configured from the environment."""
    settings = LedgerSettings.from_env()
    return GetLedgerSummaryUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        top_limit=settings.top_limit,
        fallback_label=settings.fallback_label,
    )


def build_recalculate_boxes_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> RecalculateBoxBalancesUseCase:
    """Return the travel box recalculation use case."""
    return RecalculateBoxBalancesUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_next_box_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetNextBoxUseCase:
    """Return the next travel box use case."""
    return GetNextBoxUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_asset_statistics_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetAssetStatisticsUseCase:
    """Return the patrimony statistics use case."""
    settings = LedgerSettings.from_env()
    return GetAssetStatisticsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        window_months=settings.asset_window_months,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_ledger_statistics_use_case",
    "build_ledger_summary_use_case",
    "build_recalculate_boxes_use_case",
    "build_next_box_use_case",
    "build_asset_statistics_use_case",
]

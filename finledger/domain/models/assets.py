"""Domain models for patrimony tracking."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AssetRecord:
    """Tracked asset ("patrimônio")."""

    id: str
    asset_type: str | None
    sector: str | None = None
    hidden: bool = False


@dataclass(frozen=True)
class MovementRecord:
    """Movement of an asset between holders."""

    id: str
    created_at: datetime | date | str | None


@dataclass(frozen=True)
class AssetStatistics:
    """Counts used by the patrimony charts.

    Attributes:
        by_type: Number of assets per asset type.
        by_sector: Number of assets per responsible sector.
        movements_by_month: Number of movements per ``YYYY-MM`` month.
    """

    by_type: dict[str, int]
    by_sector: dict[str, int]
    movements_by_month: dict[str, int]


__all__ = ["AssetRecord", "MovementRecord", "AssetStatistics"]

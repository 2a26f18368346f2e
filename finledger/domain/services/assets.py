"""Domain services for patrimony statistics."""

from collections.abc import Iterable
from datetime import date

from finledger.domain.models import AssetRecord, AssetStatistics, MovementRecord
from finledger.domain.services.dates import parse_entry_date
from finledger.domain.services.grouping import count_by_label


def compute_asset_statistics(
    assets: Iterable[AssetRecord],
    movements: Iterable[MovementRecord],
    *,
    since: date | None = None,
    type_fallback: str = "Sem tipo",
    sector_fallback: str = "Sem setor",
) -> AssetStatistics:
    """Count assets by type and sector, and movements by month.

    Args:
        assets: Visible assets.
        movements: Asset movements.
        since: Optional lower bound for movement dates.
        type_fallback: Label for assets without a type.
        sector_fallback: Label for assets without a responsible sector.

    Returns:
        AssetStatistics: Counts keyed by label in first-seen order; months
        are sorted chronologically.
    """
    asset_list = list(assets)
    by_type = count_by_label(
        asset_list,
        lambda asset: asset.asset_type,
        type_fallback,
    )
    by_sector = count_by_label(
        asset_list,
        lambda asset: asset.sector,
        sector_fallback,
    )

    by_month: dict[str, int] = {}
    for movement in movements:
        day = parse_entry_date(movement.created_at)
        if day is None:
            continue
        if since is not None and day < since:
            continue
        key = f"{day.year:04d}-{day.month:02d}"
        by_month[key] = by_month.get(key, 0) + 1

    return AssetStatistics(
        by_type=by_type,
        by_sector=by_sector,
        movements_by_month=dict(sorted(by_month.items())),
    )


__all__ = ["compute_asset_statistics"]

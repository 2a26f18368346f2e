"""Visibility policy for soft-deleted records."""


def is_visible(record) -> bool:
    """Return True unless the record carries a truthy ``hidden`` flag.

    Args:
        record: Account, travel box or asset record.

    Returns:
        bool: True when the record should be listed and aggregated.
    """
    return not getattr(record, "hidden", False)


def visible_only(records) -> list:
    """Return the visible records, preserving order."""
    return [record for record in records if is_visible(record)]


__all__ = ["is_visible", "visible_only"]

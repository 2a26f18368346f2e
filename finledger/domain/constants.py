"""Domain constants for ledger summaries."""

LEDGER_CURRENT = "current"
LEDGER_TRAVEL = "travel"
LEDGER_KINDS = (LEDGER_CURRENT, LEDGER_TRAVEL)

DEFAULT_FALLBACK_LABEL = "OUTROS"
NO_DESTINATION_LABEL = "Sem destino"
NO_SECTOR_LABEL = "Sem setor"

SUPPLIER_ATTRIBUTE = "supplier"

DEFAULT_TOP_LIMIT = 5
DEFAULT_STATS_TOP_LIMIT = 10


__all__ = [
    "LEDGER_CURRENT",
    "LEDGER_TRAVEL",
    "LEDGER_KINDS",
    "DEFAULT_FALLBACK_LABEL",
    "NO_DESTINATION_LABEL",
    "NO_SECTOR_LABEL",
    "SUPPLIER_ATTRIBUTE",
    "DEFAULT_TOP_LIMIT",
    "DEFAULT_STATS_TOP_LIMIT",
]

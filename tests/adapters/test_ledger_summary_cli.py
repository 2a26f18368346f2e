"""Tests for the ledger_summary_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finledger.adapters import ledger_summary_cli
from finledger.application.use_cases.get_ledger_statistics import (
    LedgerStatistics,
)
from finledger.domain.models import Account, AggregationOptions, Entry
from finledger.domain.services import aggregate, month_period


def test_main_prints_statistics(monkeypatch, capsys) -> None:
    """The CLI should run the use case and print totals and groups."""
    period = month_period(date(2024, 3, 10))
    aggregation = aggregate(
        [
            Account(
                id="1",
                entries=(Entry(date=date(2024, 3, 2), credit="150.5"),),
                attributes={"destination": "Manaus"},
            )
        ],
        AggregationOptions(group_by="destination", period=period),
    )
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = LedgerStatistics(
        ledger="travel",
        account_count=1,
        period=period,
        aggregation=aggregation,
    )
    monkeypatch.setenv("LEDGER_KIND", "Travel")
    monkeypatch.setenv("LEDGER_OWNER_ID", "user-2")
    usage_logger = MagicMock()
    monkeypatch.setattr(ledger_summary_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        ledger_summary_cli, "get_usage_logger", lambda: usage_logger
    )
    monkeypatch.setattr(
        ledger_summary_cli,
        "build_ledger_statistics_use_case",
        lambda: fake_use_case,
    )

    ledger_summary_cli.main()

    fake_use_case.execute.assert_called_once_with("travel", owner_id="user-2")
    usage_logger.info.assert_called_once_with(
        "summary ledger=travel owner=user-2"
    )
    captured = capsys.readouterr()
    assert "credits=150.50" in captured.out
    assert "Month 2024-03" in captured.out
    assert "Manaus: count=1" in captured.out
    assert aggregation.net_balance == Decimal("150.5")


def test_main_logs_configuration_errors(monkeypatch, capsys) -> None:
    """Configuration failures are logged instead of raised."""
    logger = MagicMock()
    monkeypatch.setattr(ledger_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(ledger_summary_cli, "get_usage_logger", MagicMock)
    monkeypatch.delenv("LEDGER_KIND", raising=False)
    monkeypatch.delenv("LEDGER_OWNER_ID", raising=False)

    def _raise():
        raise RuntimeError("Missing environment variable: LEDGER_DB_URL")

    monkeypatch.setattr(
        ledger_summary_cli,
        "build_ledger_statistics_use_case",
        _raise,
    )

    ledger_summary_cli.main()

    logger.error.assert_called_once_with(
        "Missing environment variable: LEDGER_DB_URL"
    )
    assert capsys.readouterr().out == ""


def test_main_records_usage_for_default_scope(monkeypatch) -> None:
    """Without overrides the usage line names the current ledger for all."""
    usage_logger = MagicMock()
    monkeypatch.delenv("LEDGER_KIND", raising=False)
    monkeypatch.delenv("LEDGER_OWNER_ID", raising=False)
    monkeypatch.setattr(ledger_summary_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        ledger_summary_cli, "get_usage_logger", lambda: usage_logger
    )

    def _raise():
        raise RuntimeError("Missing environment variable: LEDGER_DB_URL")

    monkeypatch.setattr(
        ledger_summary_cli, "build_ledger_statistics_use_case", _raise
    )

    ledger_summary_cli.main()

    usage_logger.info.assert_called_once_with("summary ledger=current owner=all")

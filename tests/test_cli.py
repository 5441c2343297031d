"""Tests for the command line interface."""

import sys
import pytest
from storm_impact.application.services.storm_impact_service import StormImpactService
from storm_impact.config.settings import EVENT_GROUP_DEFINITIONS
from storm_impact.infrastructure.repositories.csv_storm_data_repository import (
    CsvStormDataRepository,
)
from storm_impact.presentation.cli import main as cli
from storm_rows import COLUMNS, storm_row


def _use_catalog(monkeypatch, path):
    service = StormImpactService(
        storm_data_repo=CsvStormDataRepository(str(path)),
        event_group_definitions=EVENT_GROUP_DEFINITIONS,
    )
    monkeypatch.setattr(cli, "build_service", lambda with_report=False: service)


def test_analyze_prints_tables(write_storm_csv, monkeypatch, capsys):
    """Test the analyze command prints both tables."""
    path = write_storm_csv(
        [storm_row("TSTM WIND", injuries="1", propdmg="10", propdmgexp="K")]
    )
    _use_catalog(monkeypatch, path)
    monkeypatch.setattr(sys, "argv", ["storm-impact", "analyze"])

    cli.main()

    out = capsys.readouterr().out
    assert "POPULATION HEALTH IMPACT BY EVENT GROUP" in out
    assert "ECONOMIC IMPACT BY EVENT GROUP" in out
    assert "rain/storms" in out
    assert "Events with impact: 1" in out


def test_malformed_catalog_exits(write_storm_csv, monkeypatch):
    """Test a missing column ends the run with status 1."""
    columns = [c for c in COLUMNS if c != "EVTYPE"]
    _use_catalog(monkeypatch, write_storm_csv([storm_row()], columns=columns))
    monkeypatch.setattr(sys, "argv", ["storm-impact", "analyze"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 1

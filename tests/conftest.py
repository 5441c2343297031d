"""Shared fixtures."""

import bz2
import csv
import pytest
from storm_rows import COLUMNS, storm_row


@pytest.fixture
def write_storm_csv(tmp_path):
    """Write rows to a bzip2 CSV and return its path."""

    def _write(rows, columns=COLUMNS, name="StormData.csv.bz2"):
        path = tmp_path / name
        with bz2.open(path, "wt", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def sample_rows():
    """A small catalog covering every event group."""
    return [
        storm_row("TSTM WIND", injuries="1", propdmg="10", propdmgexp="K"),
        storm_row("TORNADO", fatalities="2", injuries="10", propdmg="2.5", propdmgexp="M",
                  bgn_date="4/18/1950 0:00:00"),
        storm_row("FLASH FLOOD", propdmg="1", propdmgexp="B", cropdmg="500", cropdmgexp="k",
                  bgn_date="1/1/2006 0:00:00"),
        storm_row("WINTER STORM", injuries="3", bgn_date="2/2/2001 0:00:00"),
        storm_row("EXCESSIVE HEAT", fatalities="5", bgn_date="7/15/1999 0:00:00"),
        storm_row("DENSE FOG", injuries="4", bgn_date="11/3/2003 0:00:00"),
        storm_row("VOLCANIC ASH", cropdmg="3", cropdmgexp="?", bgn_date="5/18/1980 0:00:00"),
        storm_row("HAIL", bgn_date="6/1/2005 0:00:00"),  # no impact
    ]

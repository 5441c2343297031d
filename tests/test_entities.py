"""Tests for domain entities."""

import dataclasses
import pytest
from storm_impact.domain.entities.event_group import EventGroup
from storm_impact.domain.entities.clean_record import CleanRecord
from storm_impact.domain.entities.exponent_code import ExponentCode, ExponentKind
from storm_impact.domain.entities.impact_aggregate import ImpactAggregate, ImpactSummary
from storm_impact.domain.entities.raw_record import RawRecord


def test_event_group():
    """Test EventGroup enum."""
    assert EventGroup("rain/storms") is EventGroup.RAIN_STORMS
    assert str(EventGroup.SUMMER_HEAT) == "summer/heat"
    assert [g.value for g in EventGroup] == [
        "rain/storms",
        "tornado/hail",
        "flood",
        "winter",
        "summer/heat",
        "fog",
        "others",
    ]


def test_raw_record_is_immutable():
    """Test RawRecord cannot be modified."""
    record = RawRecord("HAIL", 0, 1, 0.0, "", 0.0, "", "6/1/2005 0:00:00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.injuries = 2


def test_clean_record():
    """Test CleanRecord defaults and derived totals."""
    record = CleanRecord(
        year=1995,
        event_type="tstm wind",
        fatalities=1,
        injuries=2,
        property_damage=0.5,
        crop_damage=0.25,
    )
    assert record.event_group == EventGroup.OTHERS
    assert record.health_impact == 3
    assert record.economic_impact == pytest.approx(0.75)


def test_exponent_code():
    """Test ExponentCode recognition flag."""
    assert ExponentCode("k", ExponentKind.LETTER, 3).is_recognized
    assert ExponentCode("", ExponentKind.EMPTY, 0).is_recognized
    assert not ExponentCode("?", ExponentKind.UNKNOWN, 0).is_recognized


def test_impact_aggregate_means():
    """Test means are derived from sums and count."""
    aggregate = ImpactAggregate(
        EventGroup.FLOOD, count=4, injuries=10, fatalities=2,
        property_damage=8.0, crop_damage=1.0,
    )
    assert aggregate.injuries_mean == 2.5
    assert aggregate.fatalities_mean == 0.5
    assert aggregate.property_damage_mean == 2.0
    assert aggregate.crop_damage_mean == 0.25
    assert aggregate.health_total == 12
    assert aggregate.economic_total == 9.0


def test_empty_aggregate_means_are_zero():
    """Test an empty aggregate does not divide by zero."""
    assert ImpactAggregate(EventGroup.FOG).injuries_mean == 0.0


def test_impact_aggregate_merge():
    """Test merging partial aggregates."""
    a = ImpactAggregate(EventGroup.FLOOD, count=1, injuries=1, property_damage=1.0)
    b = ImpactAggregate(EventGroup.FLOOD, count=2, injuries=5, fatalities=1, crop_damage=2.0)
    merged = a.merge(b)
    assert merged.count == 3
    assert merged.injuries == 6
    assert merged.injuries_mean == 2.0
    assert merged.fatalities == 1
    assert merged.property_damage == 1.0
    assert merged.crop_damage == 2.0


def test_impact_aggregate_merge_other_group():
    """Test merging different groups is refused."""
    with pytest.raises(ValueError):
        ImpactAggregate(EventGroup.FLOOD).merge(ImpactAggregate(EventGroup.FOG))


def test_impact_summary_get():
    """Test ImpactSummary lookup by group."""
    flood = ImpactAggregate(EventGroup.FLOOD, count=1)
    summary = ImpactSummary(health=[flood], economic=[flood], records=1)
    assert summary.get(EventGroup.FLOOD) is flood
    with pytest.raises(KeyError):
        summary.get(EventGroup.FOG)

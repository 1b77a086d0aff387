from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gridcast.domain.entities.demand import (
    DemandRecord,
    FeatureVector,
    compute_accuracy,
    day_of_week,
    ensure_utc,
)


def test_day_of_week_starts_on_sunday() -> None:
    sunday = datetime(2024, 1, 7, 12, tzinfo=timezone.utc)
    assert day_of_week(sunday) == 0
    assert day_of_week(sunday + timedelta(days=1)) == 1
    assert day_of_week(sunday + timedelta(days=6)) == 6


def test_ensure_utc_treats_naive_as_utc_and_converts_offsets() -> None:
    naive = datetime(2024, 3, 1, 5)
    assert ensure_utc(naive) == datetime(2024, 3, 1, 5, tzinfo=timezone.utc)

    plus_four = timezone(timedelta(hours=4))
    converted = ensure_utc(datetime(2024, 3, 1, 2, tzinfo=plus_four))
    assert converted == datetime(2024, 2, 29, 22, tzinfo=timezone.utc)
    assert converted.tzinfo == timezone.utc


def test_record_calendar_fields_derive_from_instant() -> None:
    instant = datetime(2024, 6, 15, 18, 30, tzinfo=timezone.utc)  # a Saturday
    record = DemandRecord.at(
        "s1", instant, temperature=40.0, humidity=30.0, forecasted_demand=150.0
    )
    assert record.hour == 18
    assert record.day_of_week == 6
    assert record.date == instant


def test_record_computes_accuracy_only_with_both_values() -> None:
    observed = DemandRecord.at(
        "s1",
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        temperature=25.0,
        humidity=40.0,
        forecasted_demand=110.0,
        actual_demand=100.0,
    )
    forecast_only = DemandRecord.at(
        "s1",
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        temperature=25.0,
        humidity=40.0,
        forecasted_demand=110.0,
    )
    assert observed.accuracy == pytest.approx(90.0)
    assert forecast_only.accuracy is None


def test_accuracy_goes_negative_for_large_errors() -> None:
    assert compute_accuracy(300.0, 100.0) == pytest.approx(-100.0)
    assert compute_accuracy(None, 100.0) is None


def test_feature_vector_uses_forecast_when_actual_missing() -> None:
    record = DemandRecord.at(
        "s1",
        datetime(2024, 1, 2, 9, tzinfo=timezone.utc),
        temperature=28.5,
        humidity=55.0,
        forecasted_demand=131.0,
    )
    assert record.to_feature_vector() == FeatureVector(28.5, 55.0, 2, 9, 131.0)
    assert record.to_training_pair() is None


def test_training_pair_targets_actual_demand() -> None:
    record = DemandRecord.at(
        "s1",
        datetime(2024, 1, 2, 9, tzinfo=timezone.utc),
        temperature=28.5,
        humidity=55.0,
        forecasted_demand=131.0,
        actual_demand=127.0,
    )
    vector, target = record.to_training_pair()
    assert vector.prior_demand == 127.0
    assert target == 127.0


def test_record_keeps_missing_accuracy_when_derivation_is_off() -> None:
    record = DemandRecord.at(
        "s1",
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        temperature=25.0,
        humidity=40.0,
        forecasted_demand=150.0,
        actual_demand=100.0,
        derive_accuracy=False,
    )
    assert record.accuracy is None

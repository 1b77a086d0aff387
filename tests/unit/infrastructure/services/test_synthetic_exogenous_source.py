from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gridcast.infrastructure.services.synthetic_exogenous_source import (
    SyntheticExogenousSource,
)

T0 = datetime(2025, 6, 1, tzinfo=timezone.utc)


def test_draws_stay_within_default_ranges() -> None:
    source = SyntheticExogenousSource()

    for offset in range(48):
        conditions = source.conditions_at("s1", T0 + timedelta(hours=offset))
        assert 30.0 <= conditions.temperature <= 35.0
        assert 40.0 <= conditions.humidity <= 50.0
        assert 100.0 <= conditions.prior_demand <= 150.0


def test_seeded_source_is_deterministic_per_hour() -> None:
    first = SyntheticExogenousSource(seed=11)
    second = SyntheticExogenousSource(seed=11)

    later = T0 + timedelta(hours=5)
    # drawing other hours first does not shift the result
    first.conditions_at("s1", T0)
    assert first.conditions_at("s1", later) == second.conditions_at("s1", later)


def test_seeded_source_varies_by_hour() -> None:
    source = SyntheticExogenousSource(seed=11)
    draws = {source.conditions_at("s1", T0 + timedelta(hours=h)) for h in range(6)}
    assert len(draws) > 1


def test_degenerate_range_is_constant() -> None:
    source = SyntheticExogenousSource(
        temperature_range=(31.0, 31.0),
        humidity_range=(45.0, 45.0),
        prior_demand_range=(120.0, 120.0),
    )

    conditions = source.conditions_at("s1", T0)

    assert (conditions.temperature, conditions.humidity, conditions.prior_demand) == (
        31.0,
        45.0,
        120.0,
    )


def test_inverted_range_is_rejected() -> None:
    with pytest.raises(ValueError, match="humidity_range"):
        SyntheticExogenousSource(humidity_range=(60.0, 40.0))


def test_seeded_source_separates_stations_with_same_characters() -> None:
    source = SyntheticExogenousSource(seed=11)
    assert source.conditions_at("ab", T0) != source.conditions_at("ba", T0)

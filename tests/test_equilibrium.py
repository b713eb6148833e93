import logging
import math

import pytest

from energy_balance import kelvin_to_celsius, solve_equilibrium
from energy_balance.equilibrium import absorbed_shortwave


def test_absorbed_shortwave():
    assert absorbed_shortwave(1361.0, 0.30) == pytest.approx(238.175)


def test_no_greenhouse_temperature_ignores_forcing():
    low = solve_equilibrium(1361.0, 0.30, 0.0)
    high = solve_equilibrium(1361.0, 0.30, 200.0)
    assert low.no_greenhouse_temperature == pytest.approx(255.0, abs=0.5)
    assert high.no_greenhouse_temperature == low.no_greenhouse_temperature
    assert high.temperature > low.temperature


def test_zero_forcing_equals_effective_temperature():
    state = solve_equilibrium(1361.0, 0.30, 0.0)
    assert state.temperature == pytest.approx(state.no_greenhouse_temperature)


def test_extreme_negative_forcing_hits_floor(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="energy_balance.equilibrium"):
        state = solve_equilibrium(1361.0, 0.8, -1000.0)
    assert math.isfinite(state.temperature)
    assert state.temperature > 0.0
    assert state.temperature == pytest.approx((1e-3 / 5.670374419e-8) ** 0.25)
    assert "below floor" in caplog.text


def test_celsius_conversion():
    assert kelvin_to_celsius(288.0) == pytest.approx(14.85)
    state = solve_equilibrium(1361.0, 0.30, 0.0)
    assert state.temperature_c == pytest.approx(state.temperature - 273.15)
    assert state.no_greenhouse_temperature_c == pytest.approx(
        state.no_greenhouse_temperature - 273.15
    )

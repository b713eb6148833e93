import pytest

from energy_balance import (
    DEFAULT_REFERENCE,
    ReferenceConstants,
    baseline_calibration,
    calibrate,
    solve_equilibrium,
)


def test_calibrated_forcing_matches_reference_balance():
    f0 = calibrate()
    absorbed = (1 - 0.30) * 1361 / 4
    assert f0 == pytest.approx(5.670374419e-8 * 288.0**4 - absorbed)
    assert f0 == pytest.approx(151.93, abs=0.01)


def test_calibration_reproduces_reference_temperature():
    f0 = calibrate()
    state = solve_equilibrium(
        DEFAULT_REFERENCE.solar_constant, DEFAULT_REFERENCE.albedo, f0 + 0.0
    )
    assert state.temperature == pytest.approx(DEFAULT_REFERENCE.surface_temperature, abs=1e-6)


def test_baseline_calibration_is_computed_once_per_reference():
    first = baseline_calibration()
    second = baseline_calibration(DEFAULT_REFERENCE)
    assert first is second
    assert first.baseline_forcing == calibrate()


def test_custom_reference_is_calibrated_separately():
    warm = ReferenceConstants(surface_temperature=290.0)
    calibration = baseline_calibration(warm)
    assert calibration.reference == warm
    assert calibration.baseline_forcing > calibrate()
    state = solve_equilibrium(warm.solar_constant, warm.albedo, calibration.baseline_forcing)
    assert state.temperature == pytest.approx(290.0, abs=1e-6)


def test_calibration_is_immutable():
    calibration = baseline_calibration()
    with pytest.raises(AttributeError):
        calibration.baseline_forcing = 0.0  # type: ignore[misc]

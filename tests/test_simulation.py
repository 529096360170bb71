import numpy as np
import pytest

from orrery import (
    ConfigurationError,
    NBodySimulation,
    SimConfig,
    solar_system,
)

from conftest import distance


def test_tick_runs_planned_substeps_and_returns_snapshot(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    seen = []

    snap = sim.tick(1.0 / 60.0, on_substep=lambda s: seen.append(s.time))

    assert len(seen) == 17
    assert sim.time == pytest.approx(17 * quiet_config.base_dt)
    assert np.all(np.diff(seen) > 0.0)
    assert [entry["name"] for entry in snap] == ["Sun", "Planet"]
    assert set(snap[1]) == {"name", "position", "velocity"}
    assert sim.n_ticks == 1


def test_snapshot_is_a_copy(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    snap = sim.snapshot()
    snap[1]["position"][:] = 123.0
    sim.positions()[1] = 55.0
    assert sim.body("Planet").x == pytest.approx(1.0)


def test_body_views_are_read_only(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    planet = next(b for b in sim.bodies if b.name == "Planet")
    with pytest.raises(AttributeError):
        planet.position = np.zeros(3)
    planet.position[:] = 0.0
    assert planet.x == pytest.approx(1.0)


def test_identical_runs_are_identical(quiet_config):
    a = NBodySimulation.from_specs(solar_system(), quiet_config)
    b = NBodySimulation.from_specs(solar_system(), quiet_config)
    for _ in range(20):
        a.tick(1.0 / 60.0)
        b.tick(1.0 / 60.0)
    assert np.array_equal(a.positions(), b.positions())
    assert np.array_equal(a.velocities(), b.velocities())


def test_solar_system_stays_bound_for_a_year():
    cfg = SimConfig(base_dt=5e-4, force_method="vectorized", diag_prints=False)
    sim = NBodySimulation.from_specs(solar_system(), cfg)
    diag = sim.diagnostics()
    E0 = diag.energy()

    earth_sun = []
    moon_earth = []
    for _ in range(2000):
        sim.step()
        earth_sun.append(distance(sim, "Earth", "Sun"))
        moon_earth.append(distance(sim, "Moon", "Earth"))

    assert sim.time == pytest.approx(1.0)
    assert 0.9 < min(earth_sun) and max(earth_sun) < 1.1
    assert 0.5 * 0.00257 < min(moon_earth) and max(moon_earth) < 1.5 * 0.00257
    assert diag.relative_energy_error(E0) < 1e-3


def test_run_with_explicit_dt_and_callback(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    calls = []
    sim.run(10, dt=0.01, on_substep=lambda s: calls.append(s.time))
    assert len(calls) == 10
    assert sim.time == pytest.approx(0.1)


def test_accumulator_mode_from_config(circular_specs):
    cfg = SimConfig(stepper_mode="accumulator", diag_prints=False)
    sim = NBodySimulation.from_specs(circular_specs, cfg)
    for _ in range(60):
        sim.tick(1.0 / 60.0)
    assert sim.time == pytest.approx(cfg.speed_multiplier, abs=cfg.base_dt * 1.01)


@pytest.mark.parametrize(
    "overrides",
    [
        dict(base_dt=0.0),
        dict(base_dt=float("nan")),
        dict(speed_multiplier=-1.0),
        dict(softening=-1e-9),
        dict(max_substeps=0),
        dict(stepper_mode="adaptive"),
        dict(force_method="tree"),
    ],
)
def test_invalid_config_is_rejected(circular_specs, overrides):
    with pytest.raises(ConfigurationError):
        NBodySimulation.from_specs(circular_specs, SimConfig(**overrides))


def test_config_is_copied(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    quiet_config.base_dt = 1.0
    assert sim.cfg.base_dt != 1.0

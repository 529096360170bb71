import math

import numpy as np
import pytest

from orrery import (
    Body,
    CentralBodySpec,
    PlanetSpec,
    SimConfig,
    SimulationState,
    UnitSystem,
)
from orrery.diagnostics import reset_diag_counts


@pytest.fixture(autouse=True)
def _fresh_diag_counts():
    reset_diag_counts()
    yield
    reset_diag_counts()


@pytest.fixture
def units():
    return UnitSystem.solar()


@pytest.fixture
def circular_specs():
    # test particle on a 1 AU, 1 year circular orbit around one solar mass
    return [
        CentralBodySpec("Sun"),
        PlanetSpec("Planet", mass_fraction=1.0e-6, semi_major_axis=1.0, period_years=1.0),
    ]


@pytest.fixture
def quiet_config():
    return SimConfig(diag_prints=False)


def random_state(n=6, seed=7):
    rng = np.random.default_rng(seed)
    bodies = [
        Body(
            f"b{i}",
            float(rng.uniform(0.1, 2.0)),
            rng.normal(size=3) * 3.0,
            rng.normal(size=3) * 0.5,
        )
        for i in range(n)
    ]
    return SimulationState.from_bodies(bodies)


def distance(sim, a, b):
    return float(np.linalg.norm(sim.body(a).position - sim.body(b).position))


TWO_PI = 2.0 * math.pi

"""
This initialization file serves as the main entry point for the orrery N-body package,
exposing the public API through a flat namespace.

It re-exports the unit system (UnitSystem), the orbital-elements initializer
(OrbitalElements, orbital_state, satellite_state), the body store (Body, BodyView,
SimulationState) and the configuration entries and ordered builder that fill it
(CentralBodySpec, PlanetSpec, SatelliteSpec, SystemBuilder, solar_system), the force
kernels (ForceEvaluator, pairwise_accelerations, vectorized_accelerations), the
leapfrog Integrator, the frame steppers, the NBodySimulation facade, diagnostics,
trajectory recording, configuration and the exception types. Internal module layout
stays one concern per module; everything a host needs is importable from the package
root.
"""

from .errors import OrreryError, ConfigurationError, NumericalInstabilityError
from .sim_config import SimConfig
from .simulation_validator import SimulationValidator
from .units import UnitSystem
from .orbital_elements import OrbitalElements, orbital_state, satellite_state

from .body import Body
from .body_view import BodyView
from .simulation_state import SimulationState
from .system_builder import (
    CentralBodySpec,
    PlanetSpec,
    SatelliteSpec,
    SystemBuilder,
)
from .presets import solar_system

from .forces import ForceEvaluator, pairwise_accelerations, vectorized_accelerations
from .geometry_cache import geometry_buffers
from .potential import softened_potential
from .integrator import Integrator
from .leapfrog_scheme import LeapfrogScheme
from .frame_stepper import (
    FrameStepper,
    SpeedMultiplierStepper,
    AccumulatingStepper,
    make_stepper,
)
from .simulation import NBodySimulation

from .diagnostics import Diagnostics
from .trajectory import TrajectoryRecorder


__all__ = [
    "OrreryError",
    "ConfigurationError",
    "NumericalInstabilityError",
    "SimConfig",
    "SimulationValidator",
    "UnitSystem",
    "OrbitalElements",
    "orbital_state",
    "satellite_state",
    "Body",
    "BodyView",
    "SimulationState",
    "CentralBodySpec",
    "PlanetSpec",
    "SatelliteSpec",
    "SystemBuilder",
    "solar_system",
    "ForceEvaluator",
    "pairwise_accelerations",
    "vectorized_accelerations",
    "geometry_buffers",
    "softened_potential",
    "Integrator",
    "LeapfrogScheme",
    "FrameStepper",
    "SpeedMultiplierStepper",
    "AccumulatingStepper",
    "make_stepper",
    "NBodySimulation",
    "Diagnostics",
    "TrajectoryRecorder",
]

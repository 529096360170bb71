from __future__ import annotations
from dataclasses import dataclass

from .constants import (
    DEFAULT_BASE_DT,
    DEFAULT_SPEED_MULTIPLIER,
    DEFAULT_SOFTENING,
    DEFAULT_MAX_SUBSTEPS,
)
from .simulation_validator import SimulationValidator

"""
This central configuration module defines the runtime parameters of the simulation through the SimConfig dataclass. Key parameters include the fixed sub-step size base_dt (simulation time units), the speed_multiplier that converts wall-clock seconds into simulated time, the softening constant added to squared separations, the frame stepping policy (speed_multiplier or accumulator), the cap on sub-steps per tick, the force kernel selection, the post-step finiteness guard and the diagnostic print throttling. The class provides a copy method for configuration inheritance and a validate method that rejects unusable values through SimulationValidator. It serves as the single source of truth for the integration loop, with all components reading this configuration.

"""


@dataclass
class SimConfig:
    base_dt: float = DEFAULT_BASE_DT
    speed_multiplier: float = DEFAULT_SPEED_MULTIPLIER
    softening: float = DEFAULT_SOFTENING
    stepper_mode: str = "speed_multiplier"
    max_substeps: int = DEFAULT_MAX_SUBSTEPS
    force_method: str = "pairwise"
    check_finite: bool = True
    recenter_momentum: bool = False
    diag_prints: bool = True
    diag_print_limit: int = 3
    diag_print_interval: int = 1000

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new

    def validate(self) -> "SimConfig":
        SimulationValidator.validate_config(self)
        return self

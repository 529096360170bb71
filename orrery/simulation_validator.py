"""
This module provides validation utilities for N-body simulation states and settings.

The SimulationValidator class offers static methods that check body lists (positive
finite masses, finite 3-vectors, unique names), SimConfig values (positive finite step
and speed settings, non-negative softening, known stepper and force modes) and the
post-step finiteness of a running state. Configuration problems raise
ConfigurationError before the simulation starts; a non-finite state after a step raises
NumericalInstabilityError naming the first offending body, after report_invalid_state
has printed every body whose position or velocity is no longer finite. state_is_valid
gives a non-raising check of raw arrays.
"""

from __future__ import annotations
import math
from typing import Sequence, TYPE_CHECKING
import numpy as np

from .constants import STEPPER_MODES, FORCE_METHODS
from .errors import ConfigurationError, NumericalInstabilityError

if TYPE_CHECKING:
    from .body import Body
    from .sim_config import SimConfig
    from .simulation_state import SimulationState





class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions,
		velocities,
		softening: float = 0.0,
	) -> bool:
		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 3:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		if not (math.isfinite(softening) and softening >= 0.0):
			return False

		return True

	@staticmethod
	def validate_bodies(bodies: Sequence["Body"]) -> None:
		seen = set()
		for b in bodies:
			if b.name in seen:
				raise ConfigurationError(f"duplicate body name {b.name!r}")
			seen.add(b.name)
			if not (math.isfinite(b.mass) and b.mass > 0.0):
				raise ConfigurationError(f"{b.name}: mass must be positive and finite, got {b.mass!r}")
			if b.position.shape != (3,) or b.velocity.shape != (3,):
				raise ConfigurationError(f"{b.name}: position and velocity must be 3-vectors")
			if not (np.all(np.isfinite(b.position)) and np.all(np.isfinite(b.velocity))):
				raise ConfigurationError(f"{b.name}: position and velocity must be finite")

	@staticmethod
	def validate_config(cfg: "SimConfig") -> None:
		for label in ("base_dt", "speed_multiplier"):
			val = getattr(cfg, label)
			if not (isinstance(val, (int, float)) and math.isfinite(val) and val > 0.0):
				raise ConfigurationError(f"SimConfig.{label} must be positive and finite, got {val!r}")

		soft = cfg.softening
		if not (isinstance(soft, (int, float)) and math.isfinite(soft) and soft >= 0.0):
			raise ConfigurationError(f"SimConfig.softening must be non-negative and finite, got {soft!r}")

		if int(cfg.max_substeps) < 1:
			raise ConfigurationError(f"SimConfig.max_substeps must be at least 1, got {cfg.max_substeps!r}")

		if cfg.stepper_mode not in STEPPER_MODES:
			raise ConfigurationError(
				f"SimConfig.stepper_mode must be one of {STEPPER_MODES}, got {cfg.stepper_mode!r}"
			)
		if cfg.force_method not in FORCE_METHODS:
			raise ConfigurationError(
				f"SimConfig.force_method must be one of {FORCE_METHODS}, got {cfg.force_method!r}"
			)

	@staticmethod
	def check_finite(state: "SimulationState") -> None:
		if state.is_finite():
			return
		bad = ~(np.all(np.isfinite(state._pos), axis=1) & np.all(np.isfinite(state._vel), axis=1))
		idx = int(np.flatnonzero(bad)[0])
		name = state.names[idx]
		SimulationValidator.report_invalid_state(
			f"non-finite state at t={state.time:.6g}",
			names=state.names,
			masses=state._mass,
			positions=state._pos,
			velocities=state._vel,
		)
		raise NumericalInstabilityError(
			f"non-finite state for body {name!r} at t={state.time:.6g}; "
			f"reduce the timestep or revise the configuration",
			body=name,
			time=float(state.time),
		)

	@staticmethod
	def report_invalid_state(
		label: str,
		names=None,
		masses=None,
		positions=None,
		velocities=None,
		softening=None,
	) -> None:

		print(f"[invalid] {label}")
		if softening is not None:
			print("softening", softening)
		if positions is None or velocities is None:
			return
		for i, (pos, vel) in enumerate(zip(positions, velocities)):
			if np.all(np.isfinite(pos)) and np.all(np.isfinite(vel)):
				continue
			label_i = names[i] if names is not None else f"body[{i}]"
			mass_i = float(masses[i]) if masses is not None else math.nan
			print(f"  {label_i}: mass={mass_i:.6g} position={np.asarray(pos).tolist()} velocity={np.asarray(vel).tolist()}")

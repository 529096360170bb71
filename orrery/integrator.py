from __future__ import annotations
import math
from typing import TYPE_CHECKING

from .errors import ConfigurationError
from .forces import ForceEvaluator
from .leapfrog_scheme import LeapfrogScheme
from .integration_scheme_base import IntegrationScheme
from .simulation_validator import SimulationValidator

if TYPE_CHECKING:
	from .sim_config import SimConfig
	from .simulation_state import SimulationState

"""
This module implements the Integrator class that advances the body store by fixed steps. It owns the leapfrog scheme, holds the ForceEvaluator it consumes, primes the carried acceleration once before the first step, advances the cumulative simulation time, and optionally runs a post-step finiteness check that raises NumericalInstabilityError when a step leaves any position or velocity non-finite. Divergence from an oversized dt is not corrected; the caller is expected to choose a smaller step. The class assumes it is the only writer of the state it is given.

"""

class Integrator:
	def __init__(
		self,
		state: "SimulationState",
		evaluator: ForceEvaluator,
		*,
		check_finite: bool = True,
	) -> None:
		self.state = state
		self.evaluator = evaluator
		self.check_finite = bool(check_finite)
		self.n_steps = 0
		self._primed = False
		self._scheme: IntegrationScheme = LeapfrogScheme(self)

	@classmethod
	def from_config(cls, state: "SimulationState", cfg: "SimConfig", G: float) -> "Integrator":
		evaluator = ForceEvaluator(G, cfg.softening, cfg.force_method)
		return cls(state, evaluator, check_finite=cfg.check_finite)

	@property
	def primed(self) -> bool:
		return self._primed

	def prime(self) -> None:
		if self.state.n_bodies == 0:
			self._primed = True
			return
		self._scheme.refresh_acceleration()
		self._primed = True

	def step(self, dt: float) -> None:
		dt = float(dt)
		if not math.isfinite(dt):
			raise ConfigurationError(f"timestep must be finite, got {dt!r}")
		if dt == 0.0 or self.state.n_bodies == 0:
			return

		if not self._primed:
			self.prime()

		if not self._scheme.step(dt):
			return

		self.state.time += dt
		self.n_steps += 1

		if self.check_finite:
			SimulationValidator.check_finite(self.state)

	def run(self, dt: float, n_steps: int) -> None:
		for _ in range(int(n_steps)):
			self.step(dt)

"""
This base class defines the kick and drift operators shared by integration schemes.

The IntegrationScheme class updates the live state arrays owned by the integrator:
kick applies the carried acceleration to the velocities, drift advances positions with
the current velocities, and refresh_acceleration evaluates the force field at the
current positions and stores it as the carried acceleration. It also refuses re-entrant
stepping: a step requested while another is between its kicks (a custom force
evaluator or scheme hook that calls back into the integrator) is ignored with a warning
instead of interleaving two half-finished steps. Per-sub-step callbacks run after a step
has completed and may step again freely. The class assumes the parent integrator holds
a valid SimulationState and ForceEvaluator.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .integrator import Integrator



class IntegrationScheme:
	def __init__(self, integrator: "Integrator") -> None:
		self.integ = integrator
		self._in_integration = False
		self._warned_reentrant = False

	def kick(self, dt: float) -> None:
		state = self.integ.state
		state._vel += float(dt) * state._acc

	def drift(self, dt: float) -> None:
		state = self.integ.state
		state._pos += float(dt) * state._vel

	def refresh_acceleration(self) -> None:
		state = self.integ.state
		acc = self.integ.evaluator.evaluate(state._pos, state._mass)
		np.copyto(state._acc, acc)

	def step(self, dt: float) -> bool:
		if self._in_integration:
			if not self._warned_reentrant:
				print("[warning] Integrator.step called re-entrantly; call ignored")
				self._warned_reentrant = True
			return False

		self._in_integration = True
		try:
			self._step(float(dt))
		finally:
			self._in_integration = False
		return True

	def _step(self, dt: float) -> None:
		raise NotImplementedError

"""
This module implements the kick-drift-kick leapfrog (velocity Verlet) scheme.

The LeapfrogScheme class extends IntegrationScheme with the second-order symplectic
sequence: half kick with the acceleration carried from the previous step, full drift,
one fresh force evaluation at the new positions, and a closing half kick with that
acceleration. The fresh acceleration stays in the state as the carried value for the
next step, so each step costs exactly one force evaluation. The scheme conserves a
shadow energy, so orbits neither decay nor spiral out over long runs as long as dt is
small against the shortest orbital period.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme



class LeapfrogScheme(IntegrationScheme):
	def _step(self, dt: float) -> None:
		h2 = 0.5 * dt
		self.kick(h2)
		self.drift(dt)
		self.refresh_acceleration()
		self.kick(h2)

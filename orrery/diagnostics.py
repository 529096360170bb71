from __future__ import annotations
import math
from typing import TYPE_CHECKING, Tuple
import numpy as np

from .potential import softened_potential

if TYPE_CHECKING:
	from .sim_config import SimConfig
	from .simulation_state import SimulationState

"""
This module computes and monitors conserved quantities of a running N-body state. The Diagnostics class provides the kinetic energy, the potential energy with the same softening as the force kernels, their sum, the total linear momentum and angular momentum as 3-vectors, the centre of mass position and velocity, and the relative energy error against a reference energy. Linear momentum is conserved to round-off by the pairwise force construction; energy is not exactly conserved by leapfrog but oscillates without secular drift for a suitable dt, so relative_energy_error is the usual health metric. The module also holds the rate-limited diagnostic printer used across the package so that a condition hit every frame prints a few times and then only every diag_print_interval occurrences.

"""

_GLOBAL_DIAG_COUNTS: dict = {}


def rate_limited_print(key: str, msg: str, cfg: "SimConfig" | None = None) -> bool:
	if cfg is None:
		enabled = True
	else:
		enabled = bool(getattr(cfg, "diag_prints", True))
	if not enabled:
		return False

	if cfg is None:
		limit = 3
	else:
		limit = int(getattr(cfg, "diag_print_limit", 3))
	if cfg is None:
		interval = 1000
	else:
		interval = int(getattr(cfg, "diag_print_interval", 1000))
	if limit < 0:
		limit = 0
	if interval < 1:
		interval = 1

	c = _GLOBAL_DIAG_COUNTS.get(key, 0) + 1
	_GLOBAL_DIAG_COUNTS[key] = c

	if (c <= limit) or (c % interval == 0):
		if c <= limit:
			suffix = ""
		else:
			suffix = f" (occurrence #{c})"
		print(msg + suffix)
		return True
	return False


def reset_diag_counts() -> None:
	_GLOBAL_DIAG_COUNTS.clear()


class Diagnostics:

	def __init__(
		self,
		state: "SimulationState",
		G: float,
		softening: float = 0.0,
		cfg: "SimConfig" | None = None,
	) -> None:
		self.state = state
		self.G = float(G)
		self.softening = float(softening)
		self.cfg = cfg

	def kinetic_energy(self) -> float:
		m = self.state._mass
		v = self.state._vel
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		return softened_potential(self.state._pos, self.state._mass, self.G, self.softening)

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def relative_energy_error(self, E0: float) -> float:
		E = self.energy()
		if E0 == 0.0:
			return abs(E)
		err = abs((E - E0) / E0)
		if not math.isfinite(err):
			self._rate_limited_diag_print("energy", "[diag] non-finite energy error")
		return err

	def linear_momentum(self) -> np.ndarray:
		m = self.state._mass
		return np.sum(m[:, None] * self.state._vel, axis=0)

	def angular_momentum(self) -> np.ndarray:
		m = self.state._mass
		if self.state.n_bodies == 0:
			return np.zeros(3)
		return np.sum(m[:, None] * np.cross(self.state._pos, self.state._vel), axis=0)

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		m = self.state._mass
		M = float(np.sum(m))
		if M == 0.0:
			return np.zeros(3), np.zeros(3)
		com_pos = np.sum(m[:, None] * self.state._pos, axis=0) / M
		com_vel = np.sum(m[:, None] * self.state._vel, axis=0) / M
		return com_pos, com_vel

	def summary(self) -> dict:
		com_pos, com_vel = self.center_of_mass()
		KE = self.kinetic_energy()
		PE = self.potential_energy()
		return {
			"time": float(self.state.time),
			"kinetic_energy": KE,
			"potential_energy": PE,
			"total_energy": KE + PE,
			"linear_momentum": float(np.linalg.norm(self.linear_momentum())),
			"angular_momentum": float(np.linalg.norm(self.angular_momentum())),
			"com_position": float(np.linalg.norm(com_pos)),
			"com_velocity": float(np.linalg.norm(com_vel)),
			"is_bound": bool(KE + PE < 0.0),
		}

	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		rate_limited_print(key, msg, self.cfg)

"""
This module manages the internal state representation for N-body simulations.

The SimulationState class is the authoritative body store: names, masses, positions,
velocities and the carried accelerations held as contiguous numpy arrays, plus the
cumulative simulation time. Body order is fixed when the state is built and is the
index shared with the acceleration buffer. Read accessors (positions, velocities,
snapshot) hand out copies; only the integration scheme writes into the live arrays
through the underscored attributes. The state is validated on construction and rejects
non-positive masses or non-finite vectors.
"""

from __future__ import annotations
import numpy as np
from typing import Dict, List, Sequence

from .body import Body
from .body_view import BodyView
from .simulation_validator import SimulationValidator




class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self.names: List[str] = []
		self.time: float = 0.0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._acc: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._index: Dict[str, int] = {}

	@classmethod
	def from_bodies(cls, bodies: Sequence[Body]) -> "SimulationState":
		state = cls()
		state.build_state(bodies)
		return state

	@property
	def mass(self) -> np.ndarray:
		return self._mass.copy()

	@property
	def acc(self) -> np.ndarray:
		return self._acc.copy()

	def positions(self) -> np.ndarray:
		return self._pos.copy()

	def velocities(self) -> np.ndarray:
		return self._vel.copy()

	def index_of(self, name: str) -> int:
		return self._index[name]

	def view(self, name_or_index) -> BodyView:
		if isinstance(name_or_index, str):
			return BodyView(self, self._index[name_or_index])
		return BodyView(self, int(name_or_index))

	def views(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	def build_state(self, bodies: Sequence[Body]) -> None:
		bodies = list(bodies)
		SimulationValidator.validate_bodies(bodies)

		self.n_bodies = len(bodies)
		self.names = [b.name for b in bodies]
		self._index = {name: i for i, name in enumerate(self.names)}

		mass_list = []
		for b in bodies:
			mass_list.append(b.mass)
		self._mass = np.array(mass_list, dtype=np.float64)

		if bodies:
			self._pos = np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 3)
			self._vel = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(-1, 3)
		else:
			self._pos = np.empty((0, 3), dtype=np.float64)
			self._vel = np.empty((0, 3), dtype=np.float64)

		self._acc = np.zeros_like(self._pos)
		self.time = 0.0

	def snapshot(self) -> List[dict]:
		out = []
		for i, name in enumerate(self.names):
			out.append({
				"name": name,
				"position": self._pos[i].copy(),
				"velocity": self._vel[i].copy(),
			})
		return out

	def copy(self) -> "SimulationState":
		new = SimulationState()
		new.n_bodies = self.n_bodies
		new.names = list(self.names)
		new._index = dict(self._index)
		new.time = float(self.time)
		new._mass = self._mass.copy()
		new._pos = self._pos.copy()
		new._vel = self._vel.copy()
		new._acc = self._acc.copy()
		return new

	def is_finite(self) -> bool:
		return bool(np.all(np.isfinite(self._pos)) and np.all(np.isfinite(self._vel)))

	def __len__(self) -> int:
		return self.n_bodies

	def __repr__(self) -> str:
		return f"SimulationState(n_bodies={self.n_bodies}, time={self.time}, names={self.names})"

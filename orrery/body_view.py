"""
This module implements BodyView, a read-only proxy providing Body-like access to a single
row of the simulation state arrays.

The class maps attribute access (name, mass, position, velocity) onto the parent state's
arrays by index without copying the whole state. Vector attributes are returned as
copies so a rendering layer holding a view can read positions between ticks but can
never write into the arrays the integrator owns. The view assumes the parent state keeps
its body order for the lifetime of the run.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np
if TYPE_CHECKING:
    from .simulation_state import SimulationState




class BodyView:
	__slots__ = ("_state", "_i")

	def __init__(self, state: "SimulationState", idx: int) -> None:
		self._state = state
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def name(self) -> str:
		return self._state.names[self._i]

	@property
	def mass(self) -> float:
		return float(self._state._mass[self._i])

	@property
	def position(self) -> np.ndarray:
		return self._state._pos[self._i].copy()

	@property
	def velocity(self) -> np.ndarray:
		return self._state._vel[self._i].copy()

	@property
	def x(self) -> float:
		return float(self._state._pos[self._i, 0])

	@property
	def y(self) -> float:
		return float(self._state._pos[self._i, 1])

	@property
	def z(self) -> float:
		return float(self._state._pos[self._i, 2])

	def __repr__(self) -> str:
		return (f"BodyView(name={self.name!r}, mass={self.mass}, "
				f"position={self.position.tolist()}, velocity={self.velocity.tolist()})")

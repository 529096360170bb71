"""
This module provides NBodySimulation, the object a per-frame host drives.

The simulation wires the body store, the leapfrog integrator with its force evaluator,
the frame stepper and diagnostics from one SimConfig and one UnitSystem. tick(elapsed)
asks the stepper how many fixed sub-steps the frame's wall-clock time is worth, runs
them strictly in order, optionally calls on_substep(sim) after each one so trail
buffers can receive every sub-step position, and returns a snapshot of
{name, position, velocity} copies. step(dt) runs a single integration step. Readers get
copies or read-only BodyViews; the integrator is the only writer of the state.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Optional, Sequence

import numpy as np

from .body_view import BodyView
from .diagnostics import Diagnostics
from .frame_stepper import FrameStepper, make_stepper
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .system_builder import BodySpec, SystemBuilder
from .units import UnitSystem


SubstepCallback = Callable[["NBodySimulation"], None]


class NBodySimulation:

	def __init__(
		self,
		state: SimulationState,
		cfg: SimConfig | None = None,
		units: UnitSystem | None = None,
		*,
		stepper: FrameStepper | None = None,
	) -> None:
		self.cfg = (cfg or SimConfig()).copy().validate()
		self.units = units or UnitSystem.solar()
		self._state = state
		self._integrator = Integrator.from_config(state, self.cfg, self.units.G)
		self.stepper = stepper or make_stepper(self.cfg)
		self._integrator.prime()
		self.n_ticks = 0

	@classmethod
	def from_specs(
		cls,
		specs: Sequence[BodySpec],
		cfg: SimConfig | None = None,
		units: UnitSystem | None = None,
		**kwargs,
	) -> "NBodySimulation":
		cfg = (cfg or SimConfig()).copy().validate()
		units = units or UnitSystem.solar()
		state = SystemBuilder(units, recenter_momentum=cfg.recenter_momentum).build(specs)
		return cls(state, cfg, units, **kwargs)

	@property
	def G(self) -> float:
		return self.units.G

	@property
	def time(self) -> float:
		return float(self._state.time)

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def names(self) -> List[str]:
		return list(self._state.names)

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def integrator(self) -> Integrator:
		return self._integrator

	@property
	def bodies(self) -> Iterator[BodyView]:
		return iter(self._state.views())

	def body(self, name: str) -> BodyView:
		return self._state.view(name)

	def positions(self) -> np.ndarray:
		return self._state.positions()

	def velocities(self) -> np.ndarray:
		return self._state.velocities()

	def snapshot(self) -> List[dict]:
		return self._state.snapshot()

	def diagnostics(self) -> Diagnostics:
		return Diagnostics(self._state, self.G, self.cfg.softening, self.cfg)

	def step(self, dt: float | None = None) -> None:
		self._integrator.step(self.cfg.base_dt if dt is None else dt)

	def run(self, n_steps: int, dt: float | None = None, on_substep: Optional[SubstepCallback] = None) -> None:
		for _ in range(int(n_steps)):
			self.step(dt)
			if on_substep is not None:
				on_substep(self)

	def tick(self, elapsed: float, on_substep: Optional[SubstepCallback] = None) -> List[dict]:
		n_sub, dt = self.stepper.plan(elapsed)
		for _ in range(n_sub):
			self._integrator.step(dt)
			if on_substep is not None:
				on_substep(self)
		self.n_ticks += 1
		return self.snapshot()

	def __repr__(self) -> str:
		return (f"NBodySimulation(n_bodies={self.n_bodies}, time={self.time:.6g}, "
				f"G={self.G:.6g}, stepper={type(self.stepper).__name__})")

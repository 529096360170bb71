"""
This module turns a configuration of bodies into the initial body store.

A system is described by a list of entries: exactly one CentralBodySpec (the reference
mass, normally the star), any number of PlanetSpec entries given by orbital elements
around the central body, and SatelliteSpec entries that orbit a named primary, which may
be a planet or another satellite. SystemBuilder.build performs an explicit ordered pass:
the central body is placed first, then repeatedly every entry whose primary has already
been placed, so a satellite always starts from its primary's computed state. Unknown
primaries, dependency cycles, duplicate names and invalid elements raise
ConfigurationError; nothing is clamped. Masses are given as fractions of the unit
system's reference mass and distances in its reference length.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from .body import Body
from .diagnostics import Diagnostics
from .errors import ConfigurationError
from .orbital_elements import (
	OrbitalElements,
	check_mass_fraction,
	orbital_state,
	satellite_state,
)
from .simulation_state import SimulationState
from .units import UnitSystem


@dataclass(frozen=True)
class CentralBodySpec:
	name: str
	mass_fraction: float = 1.0
	position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
	velocity: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PlanetSpec:
	name: str
	mass_fraction: float
	semi_major_axis: float
	eccentricity: float = 0.0
	period_years: float = 1.0
	inclination: float = 0.0

	@property
	def elements(self) -> OrbitalElements:
		return OrbitalElements(
			mass_fraction=self.mass_fraction,
			semi_major_axis=self.semi_major_axis,
			eccentricity=self.eccentricity,
			period_years=self.period_years,
			inclination=self.inclination,
		)


@dataclass(frozen=True)
class SatelliteSpec:
	name: str
	mass_fraction: float
	primary: str
	distance: float
	period_years: float
	inclination: float = 0.0


BodySpec = Union[CentralBodySpec, PlanetSpec, SatelliteSpec]


class SystemBuilder:

	def __init__(self, units: UnitSystem | None = None, *, recenter_momentum: bool = False) -> None:
		self.units = units or UnitSystem.solar()
		self.recenter_momentum = bool(recenter_momentum)

	def _split(self, specs: Sequence[BodySpec]) -> Tuple[CentralBodySpec, List[BodySpec]]:
		central = [s for s in specs if isinstance(s, CentralBodySpec)]
		if len(central) != 1:
			raise ConfigurationError(f"exactly one central body is required, got {len(central)}")

		seen = set()
		for s in specs:
			if not isinstance(s, (CentralBodySpec, PlanetSpec, SatelliteSpec)):
				raise ConfigurationError(f"unsupported body entry {s!r}")
			if s.name in seen:
				raise ConfigurationError(f"duplicate body name {s.name!r}")
			seen.add(s.name)

		rest = [s for s in specs if not isinstance(s, CentralBodySpec)]
		return central[0], rest

	def _place_central(self, spec: CentralBodySpec) -> Body:
		check_mass_fraction(spec.mass_fraction, spec.name)
		return Body(spec.name, spec.mass_fraction, spec.position, spec.velocity)

	def _place(self, spec: BodySpec, placed: Dict[str, Body], central: Body) -> Body:
		if isinstance(spec, PlanetSpec):
			mass, pos, vel = orbital_state(spec.elements, self.units, label=spec.name)
			return Body(spec.name, mass, central.position + pos, central.velocity + vel)

		primary = placed[spec.primary]
		check_mass_fraction(spec.mass_fraction, spec.name)
		pos, vel = satellite_state(
			primary.position,
			primary.velocity,
			spec.distance,
			spec.period_years,
			self.units,
			inclination=spec.inclination,
			label=spec.name,
		)
		return Body(spec.name, spec.mass_fraction, pos, vel)

	def ordered_bodies(self, specs: Sequence[BodySpec]) -> List[Body]:
		central_spec, pending = self._split(list(specs))
		central = self._place_central(central_spec)

		placed: Dict[str, Body] = {central.name: central}
		order: List[Body] = [central]
		names = {s.name for s in specs}

		for s in pending:
			if isinstance(s, SatelliteSpec) and s.primary not in names:
				raise ConfigurationError(f"{s.name}: unknown primary {s.primary!r}")

		while pending:
			waiting = []
			for s in pending:
				if isinstance(s, SatelliteSpec) and s.primary not in placed:
					waiting.append(s)
					continue
				body = self._place(s, placed, central)
				placed[body.name] = body
				order.append(body)
			if len(waiting) == len(pending):
				cycle = ", ".join(s.name for s in waiting)
				raise ConfigurationError(f"satellite primaries form a cycle: {cycle}")
			pending = waiting

		return order

	def build(self, specs: Sequence[BodySpec]) -> SimulationState:
		state = SimulationState.from_bodies(self.ordered_bodies(specs))
		if self.recenter_momentum and state.n_bodies > 1:
			_, com_vel = Diagnostics(state, self.units.G).center_of_mass()
			state._vel -= com_vel
		return state

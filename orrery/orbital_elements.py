"""
This module turns simplified orbital elements into initial state vectors.

A body described by (mass fraction, semi-major axis, eccentricity, period, inclination)
is placed at its perihelion distance a(1 - e) on the reference x axis and given the mean
circular speed 2 pi a / period along +y, after which both vectors are tilted by the
inclination about the reference axis. Kepler's equation is not solved: every body starts
at the same orbital phase (perihelion) at t = 0, which keeps the initializer trivial at
the cost of ephemeris realism. Satellites are initialized by composing frames: the local
offset and local tangential velocity around the primary are added to the primary's
already computed state.

Semi-major axes and satellite distances are in reference-length units of the UnitSystem
(AU for UnitSystem.solar()); periods are in Julian years and are converted to
simulation time through the UnitSystem.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import ConfigurationError
from .physics_utils import rotate_about_reference_axis
from .units import UnitSystem


@dataclass(frozen=True)
class OrbitalElements:
	mass_fraction: float
	semi_major_axis: float
	eccentricity: float = 0.0
	period_years: float = 1.0
	inclination: float = 0.0

	def validate(self, label: str = "body") -> None:
		check_mass_fraction(self.mass_fraction, label)
		check_orbit(self.semi_major_axis, self.period_years, label, eccentricity=self.eccentricity)
		if not math.isfinite(float(self.inclination)):
			raise ConfigurationError(f"{label}: inclination must be finite, got {self.inclination!r}")


def check_mass_fraction(mass_fraction: float, label: str) -> None:
	m = float(mass_fraction)
	if not (math.isfinite(m) and m > 0.0):
		raise ConfigurationError(f"{label}: mass must be positive and finite, got {mass_fraction!r}")


def check_orbit(distance: float, period_years: float, label: str, *, eccentricity: float = 0.0) -> None:
	e = float(eccentricity)
	if not (math.isfinite(e) and 0.0 <= e < 1.0):
		raise ConfigurationError(f"{label}: eccentricity must lie in [0, 1), got {eccentricity!r}")
	p = float(period_years)
	if not (math.isfinite(p) and p > 0.0):
		raise ConfigurationError(f"{label}: orbital period must be positive, got {period_years!r}")
	a = float(distance)
	if not (math.isfinite(a) and a > 0.0):
		raise ConfigurationError(f"{label}: orbital distance must be positive, got {distance!r}")


def mean_circular_speed(semi_major_axis: float, period: float) -> float:
	return 2.0 * math.pi * float(semi_major_axis) / float(period)


def _local_state(
	distance: float,
	speed: float,
	inclination: float,
) -> Tuple[np.ndarray, np.ndarray]:
	pos = np.array([float(distance), 0.0, 0.0])
	vel = np.array([0.0, float(speed), 0.0])
	inc = float(inclination)
	return rotate_about_reference_axis(pos, inc), rotate_about_reference_axis(vel, inc)


def orbital_state(
	elements: OrbitalElements,
	units: UnitSystem,
	*,
	label: str = "body",
) -> Tuple[float, np.ndarray, np.ndarray]:
	"""Return (mass, position, velocity) in simulation units for a body at perihelion."""
	elements.validate(label)
	a = float(elements.semi_major_axis)
	e = float(elements.eccentricity)
	period = units.years(elements.period_years)

	pos, vel = _local_state(a * (1.0 - e), mean_circular_speed(a, period), elements.inclination)
	return float(elements.mass_fraction), pos, vel


def satellite_state(
	primary_position: np.ndarray,
	primary_velocity: np.ndarray,
	distance: float,
	period_years: float,
	units: UnitSystem,
	*,
	inclination: float = 0.0,
	label: str = "satellite",
) -> Tuple[np.ndarray, np.ndarray]:
	check_orbit(distance, period_years, label)
	period = units.years(period_years)
	off_pos, off_vel = _local_state(distance, mean_circular_speed(distance, period), inclination)
	pos = np.asarray(primary_position, dtype=float) + off_pos
	vel = np.asarray(primary_velocity, dtype=float) + off_vel
	return pos, vel

"""
This module implements the unit rescaling that keeps the N-body arithmetic in a
comfortable floating-point band.

Masses of order 1e30 kg and distances of order 1e11 m make SI force evaluation overflow
or lose precision, so the simulation works in reference units instead: masses in units
of a reference mass (normally the Sun), lengths in units of a reference length
(normally one astronomical unit) and times in units of a reference time. The
gravitational constant is rescaled once to match,

    G_scaled = G_physical * reference_mass * length_scale**3 * reference_time**2,

where length_scale = 1 / reference_length. With reference_time = 1 s this is the plain
mass/length rescaling; UnitSystem.solar() uses one Julian year so that G_scaled is
close to 4 pi^2 and an Earth orbit takes one time unit. UnitSystem instances are frozen
and are built once at startup.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from .constants import G_SI, SOLAR_MASS_KG, AU_M, JULIAN_YEAR_S
from .errors import ConfigurationError


@dataclass(frozen=True)
class UnitSystem:
	mass_scale: float
	length_scale: float
	time_scale: float
	G: float
	reference_mass: float
	reference_length: float
	reference_time: float

	@classmethod
	def from_reference(
		cls,
		G_physical: float,
		reference_mass: float,
		reference_length: float,
		reference_time: float = 1.0,
	) -> "UnitSystem":
		for label, val in (
			("G_physical", G_physical),
			("reference_mass", reference_mass),
			("reference_length", reference_length),
			("reference_time", reference_time),
		):
			v = float(val)
			if not (math.isfinite(v) and v > 0.0):
				raise ConfigurationError(f"{label} must be a positive finite number, got {val!r}")

		length_scale = 1.0 / float(reference_length)
		G_scaled = (
			float(G_physical)
			* float(reference_mass)
			* length_scale ** 3
			* float(reference_time) ** 2
		)
		return cls(
			mass_scale=1.0 / float(reference_mass),
			length_scale=length_scale,
			time_scale=1.0 / float(reference_time),
			G=G_scaled,
			reference_mass=float(reference_mass),
			reference_length=float(reference_length),
			reference_time=float(reference_time),
		)

	@classmethod
	def solar(cls, reference_time: float = JULIAN_YEAR_S) -> "UnitSystem":
		return cls.from_reference(G_SI, SOLAR_MASS_KG, AU_M, reference_time)

	def mass(self, kg: float) -> float:
		return float(kg) * self.mass_scale

	def length(self, meters: float) -> float:
		return float(meters) * self.length_scale

	def time(self, seconds: float) -> float:
		return float(seconds) * self.time_scale

	def velocity(self, meters_per_second: float) -> float:
		return float(meters_per_second) * self.length_scale / self.time_scale

	def years(self, years: float) -> float:
		"""Convert a duration in Julian years to simulation time."""
		return self.time(float(years) * JULIAN_YEAR_S)

	def __repr__(self) -> str:
		return (f"UnitSystem(M_ref={self.reference_mass:.6g} kg, "
				f"L_ref={self.reference_length:.6g} m, "
				f"T_ref={self.reference_time:.6g} s, G={self.G:.6g})")

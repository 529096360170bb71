"""
Exception types raised by the orrery package.

ConfigurationError is raised while building a system or a SimConfig from values that
cannot describe a bound orbit or a usable integration loop (non-positive masses or
periods, eccentricities outside [0, 1), unknown primaries, unusable step settings).
NumericalInstabilityError is raised after an integration step leaves a body with a
non-finite position or velocity, which is the signature of a timestep that is too large
for the fastest orbit in the system.
"""

from __future__ import annotations


class OrreryError(Exception):
	pass


class ConfigurationError(OrreryError, ValueError):
	pass


class NumericalInstabilityError(OrreryError, FloatingPointError):
	def __init__(self, message: str, *, body: str | None = None, time: float | None = None) -> None:
		super().__init__(message)
		self.body = body
		self.time = time

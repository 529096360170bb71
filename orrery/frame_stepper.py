"""
This module maps wall-clock frame time onto fixed-size integration sub-steps.

A rendering host calls plan(elapsed) once per tick with the wall-clock seconds since the
previous tick and receives (n_substeps, dt). The sub-step size is always the configured
base_dt, so the integrator sees the same step regardless of the display frame rate; the
speed multiplier converts wall-clock seconds into simulated time so that multi-year
periods play out within seconds. Two policies are provided:

* SpeedMultiplierStepper rounds the simulated time of each frame to a whole number of
  sub-steps independently per tick (any rounding remainder is forgotten).
* AccumulatingStepper carries the remainder to the next tick, so the simulated clock
  tracks wall-clock time times the multiplier to within one sub-step while frames are
  longer than a sub-step. A tick owed less than one sub-step still runs one and the
  overshoot is forgiven rather than repaid.

Both guarantee at least one sub-step per tick and cap a tick at max_substeps so a long
stall (a suspended window, a debugger pause) cannot stall the host with a huge catch-up
burst. Negative or non-finite elapsed times are reported and treated as zero. The
steppers perform no physics; make_stepper picks one from SimConfig.stepper_mode.
"""

from __future__ import annotations
import math
from typing import Tuple

from .diagnostics import rate_limited_print
from .errors import ConfigurationError
from .sim_config import SimConfig


class FrameStepper:

	def __init__(
		self,
		base_dt: float,
		speed_multiplier: float,
		max_substeps: int,
		cfg: SimConfig | None = None,
	) -> None:
		base_dt = float(base_dt)
		speed_multiplier = float(speed_multiplier)
		if not (math.isfinite(base_dt) and base_dt > 0.0):
			raise ConfigurationError(f"base_dt must be positive and finite, got {base_dt!r}")
		if not (math.isfinite(speed_multiplier) and speed_multiplier > 0.0):
			raise ConfigurationError(f"speed_multiplier must be positive and finite, got {speed_multiplier!r}")
		if int(max_substeps) < 1:
			raise ConfigurationError(f"max_substeps must be at least 1, got {max_substeps!r}")

		self.base_dt = base_dt
		self.speed_multiplier = speed_multiplier
		self.max_substeps = int(max_substeps)
		self.cfg = cfg

	@classmethod
	def from_config(cls, cfg: SimConfig) -> "FrameStepper":
		return cls(cfg.base_dt, cfg.speed_multiplier, cfg.max_substeps, cfg=cfg)

	def simulated_time(self, elapsed: float) -> float:
		elapsed = float(elapsed)
		if not math.isfinite(elapsed) or elapsed < 0.0:
			rate_limited_print(
				"frame_elapsed",
				f"[warning] ignoring invalid frame time {elapsed!r}; treating as 0",
				self.cfg,
			)
			elapsed = 0.0
		return elapsed * self.speed_multiplier

	def _cap(self, n_sub: int) -> int:
		if n_sub > self.max_substeps:
			rate_limited_print(
				"frame_cap",
				f"[warning] frame needs {n_sub} sub-steps; capped at {self.max_substeps}",
				self.cfg,
			)
			return self.max_substeps
		return n_sub

	def plan(self, elapsed: float) -> Tuple[int, float]:
		raise NotImplementedError

	def reset(self) -> None:
		pass


class SpeedMultiplierStepper(FrameStepper):
	def plan(self, elapsed: float) -> Tuple[int, float]:
		target = self.simulated_time(elapsed)
		n_sub = max(1, int(round(target / self.base_dt)))
		return self._cap(n_sub), self.base_dt


class AccumulatingStepper(FrameStepper):

	def __init__(self, *args, **kwargs) -> None:
		super().__init__(*args, **kwargs)
		self._pending = 0.0

	@property
	def pending(self) -> float:
		"""Simulated time carried to the next tick, always in [0, base_dt)."""
		return self._pending

	def plan(self, elapsed: float) -> Tuple[int, float]:
		self._pending += self.simulated_time(elapsed)
		n_sub = max(1, int(math.floor(self._pending / self.base_dt)))
		capped = self._cap(n_sub)
		if capped < n_sub:
			self._pending = capped * self.base_dt
		self._pending = max(0.0, self._pending - capped * self.base_dt)
		return capped, self.base_dt

	def reset(self) -> None:
		self._pending = 0.0


_STEPPERS = {
	"speed_multiplier": SpeedMultiplierStepper,
	"accumulator": AccumulatingStepper,
}


def make_stepper(cfg: SimConfig) -> FrameStepper:
	try:
		cls = _STEPPERS[cfg.stepper_mode]
	except KeyError:
		raise ConfigurationError(
			f"unknown stepper mode {cfg.stepper_mode!r}; expected one of {tuple(_STEPPERS)}"
		) from None
	return cls.from_config(cfg)

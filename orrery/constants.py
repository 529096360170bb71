from __future__ import annotations

import os
from typing import Final

"""
This module defines the physical constants (SI) used to build the rescaled unit system and the numerical defaults for the integration loop. DEFAULT_BASE_DT, DEFAULT_SPEED_MULTIPLIER and DEFAULT_SOFTENING can be overridden through the ORRERY_BASE_DT, ORRERY_SPEED_MULTIPLIER and ORRERY_SOFTENING environment variables; malformed or non-positive overrides fall back to the built-in defaults. Default simulation time is measured in Julian years, so the base step of 1e-4 resolves Mercury's 0.24 year orbit with roughly 2400 steps.


"""


def _parse_positive(name: str, default: float) -> float:
	env_val = os.getenv(name, "")
	if env_val.strip() != "":
		if env_val.replace(".", "", 1).replace("e-", "", 1).replace("e", "", 1).isdigit():
			val = float(env_val)
			if val > 0.0:
				return val
	return default


G_SI: Final[float] = 6.67430e-11
SOLAR_MASS_KG: Final[float] = 1.98847e30
EARTH_MASS_KG: Final[float] = 5.97217e24
AU_M: Final[float] = 1.495978707e11
DAY_S: Final[float] = 86400.0
JULIAN_YEAR_S: Final[float] = 365.25 * DAY_S

DEFAULT_BASE_DT: float = _parse_positive("ORRERY_BASE_DT", 1.0e-4)
DEFAULT_SPEED_MULTIPLIER: float = _parse_positive("ORRERY_SPEED_MULTIPLIER", 0.1)
DEFAULT_SOFTENING: float = _parse_positive("ORRERY_SOFTENING", 1.0e-9)
DEFAULT_MAX_SUBSTEPS: int = 2000

STEPPER_MODES = ("speed_multiplier", "accumulator")
FORCE_METHODS = ("pairwise", "vectorized")

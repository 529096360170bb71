"""
This module defines the Body class, a simple data container for individual celestial
bodies in the simulation.

The class stores the name, mass and the 3-component position and velocity as
floating-point numpy vectors and provides a clean string representation for debugging.
It serves as the basic building block produced by the system builder before conversion
to the array storage used during integration. Values are in simulation units.
"""

from __future__ import annotations
import numpy as np


class Body:
	def __init__(self, name: str, mass: float, position, velocity) -> None:
		self.name = str(name)
		self.mass = float(mass)
		self.position = np.array(position, dtype=np.float64).reshape(3)
		self.velocity = np.array(velocity, dtype=np.float64).reshape(3)

	def __repr__(self) -> str:
		return (f"Body(name={self.name!r}, mass={self.mass}, "
				f"position={self.position.tolist()}, velocity={self.velocity.tolist()})")

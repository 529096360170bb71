import numpy as np

"""
This module provides the small vector helpers used by the orbital-elements initializer. rotate_about_reference_axis tilts a vector by an inclination angle about the fixed x (reference) axis, which is the axis bodies are placed on at perihelion, so a position on that axis is unchanged while the tangential velocity is lifted out of the reference plane.


"""


def rotation_about_reference_axis(angle: float) -> np.ndarray:
	c = float(np.cos(angle))
	s = float(np.sin(angle))
	return np.array([
		[1.0, 0.0, 0.0],
		[0.0,   c,  -s],
		[0.0,   s,   c],
	])


def rotate_about_reference_axis(vec: np.ndarray, angle: float) -> np.ndarray:
	v = np.asarray(vec, dtype=float)
	if angle == 0.0:
		return v.copy()
	return rotation_about_reference_axis(angle) @ v


"""
This module implements the softened gravitational acceleration kernels.

pairwise_accelerations walks every unordered pair (i, j) once and applies the pair's
contribution to both bodies (Newton's third law), so each interaction is evaluated a
single time and the two contributions cancel exactly in the total momentum.
vectorized_accelerations computes the same field with numpy broadcasting through
geometry_buffers. Both add the softening constant to the squared separation,
(r^2 + softening)^-1.5, so close passes stay bounded; a pair whose softened squared
separation is zero, or so small that its inverse-square factor overflows, is skipped,
which keeps coincident and near-coincident bodies with zero softening finite. ForceEvaluator owns the acceleration buffer, which is zeroed and
refilled on every call instead of being reallocated. All functions assume (N, 3)
positions and positive masses.
"""

from __future__ import annotations
import math
import numpy as np
from numpy.typing import NDArray

from .constants import FORCE_METHODS
from .errors import ConfigurationError
from .geometry_cache import geometry_buffers


def pairwise_accelerations(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    softening: float = 0.0,
    out: NDArray[np.floating] | None = None,
) -> NDArray[np.floating]:
    pos = np.asarray(pos, dtype=float)
    n = pos.shape[0]
    if out is None:
        out = np.zeros((n, 3), dtype=float)
    else:
        out.fill(0.0)

    if n < 2 or float(G) == 0.0:
        return out

    G = float(G)
    eps = float(softening)
    p = pos.tolist()
    m = np.asarray(mass, dtype=float).tolist()
    acc = out.tolist()

    for i in range(n - 1):
        xi, yi, zi = p[i]
        ai = acc[i]
        for j in range(i + 1, n):
            xj, yj, zj = p[j]
            dx = xj - xi
            dy = yj - yi
            dz = zj - zi
            r2 = dx * dx + dy * dy + dz * dz + eps
            if r2 <= 0.0:
                continue

            # G * delta / r2^1.5, direction scaled before magnitude so tiny separations stay finite
            inv_r = 1.0 / math.sqrt(r2)
            s = G * inv_r * inv_r
            sj = s * m[j]
            si = s * m[i]
            if not (math.isfinite(sj) and math.isfinite(si)):
                continue
            ux = dx * inv_r
            uy = dy * inv_r
            uz = dz * inv_r

            ai[0] += ux * sj
            ai[1] += uy * sj
            ai[2] += uz * sj

            aj = acc[j]
            aj[0] -= ux * si
            aj[1] -= uy * si
            aj[2] -= uz * si

    out[...] = acc
    return out


def vectorized_accelerations(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    softening: float = 0.0,
    out: NDArray[np.floating] | None = None,
) -> NDArray[np.floating]:
    pos = np.asarray(pos, dtype=float)
    n = pos.shape[0]
    if out is None:
        out = np.zeros((n, 3), dtype=float)

    if n < 2 or float(G) == 0.0:
        out.fill(0.0)
        return out

    m = np.asarray(mass, dtype=float)
    diff, _, inv_r3 = geometry_buffers(pos, float(softening))
    with np.errstate(over="ignore"):
        weights = float(G) * inv_r3 * m[None, :]
    weights[~np.isfinite(weights)] = 0.0
    out[...] = np.einsum("ij,ijk->ik", weights, diff)
    return out


_KERNELS = {
    "pairwise": pairwise_accelerations,
    "vectorized": vectorized_accelerations,
}


class ForceEvaluator:
    def __init__(self, G: float, softening: float = 0.0, method: str = "pairwise") -> None:
        if method not in FORCE_METHODS:
            raise ConfigurationError(f"unknown force method {method!r}; expected one of {FORCE_METHODS}")
        self.G = float(G)
        self.softening = float(softening)
        self.method = method
        self._kernel = _KERNELS[method]
        self._buf: np.ndarray = np.zeros((0, 3), dtype=np.float64)
        self.n_evaluations = 0

    def _ensure_buffer(self, n: int) -> np.ndarray:
        if self._buf.shape[0] != n:
            self._buf = np.zeros((n, 3), dtype=np.float64)
        return self._buf

    def evaluate(self, pos: np.ndarray, mass: np.ndarray) -> np.ndarray:
        """Return the acceleration on every body; the array is reused by the next call."""
        buf = self._ensure_buffer(np.shape(pos)[0])
        self._kernel(pos, mass, self.G, self.softening, out=buf)
        self.n_evaluations += 1
        return buf

    def __call__(self, pos: np.ndarray, mass: np.ndarray) -> np.ndarray:
        return self.evaluate(pos, mass)

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray

from .geometry_cache import geometry_buffers

"""
This module computes the gravitational potential energy that matches the softened force law. softened_potential sums -G m_i m_j / sqrt(r_ij^2 + softening) over unordered pairs, taking the squared separations from the same geometry_buffers pass the vectorised force kernel uses. Pairs the force kernels skip (softened squared distance of zero) contribute nothing here either. Single particles and zero gravity give 0.0.

"""

__all__ = ["softened_potential"]


def softened_potential(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float,
    softening: float,
) -> float:
    q_arr = np.asarray(q, dtype=float)
    m_arr = np.asarray(m, dtype=float).ravel()

    n = int(q_arr.shape[0]) if q_arr.ndim == 2 else 0
    if n < 2 or float(G) == 0.0:
        return 0.0

    _, r2, _ = geometry_buffers(q_arr, softening)
    iu = np.triu_indices(n, 1)
    r_soft = np.sqrt(r2[iu] + float(softening))

    keep = r_soft > 0.0
    pair_mass = m_arr[iu[0]][keep] * m_arr[iu[1]][keep]
    return -float(G) * float(np.sum(pair_mass / r_soft[keep]))

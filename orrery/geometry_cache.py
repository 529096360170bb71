from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the vectorised geometric kernel for the pairwise force computation. The geometry_buffers function computes pairwise position differences, squared distances and softened inverse-cube factors in a single pass, using Einstein summation for the dot products. The softening constant is added to the squared distance as is (r^2 + softening), pairs whose softened squared distance is zero or whose factor overflows get a zero factor, and the diagonal is zeroed to exclude self-interaction. It assumes (N, 3) position arrays and a non-negative softening constant.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    pos: np.ndarray,
    softening: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[None, :, :] - pos[:, None, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)

    inv_r3 = np.zeros_like(r2, dtype=float)
    r2_soft = r2 + softening
    mask = r2_soft > 0.0
    if np.any(mask):
        with np.errstate(over="ignore"):
            inv_r3[mask] = np.power(r2_soft[mask], -1.5)
        inv_r3[~np.isfinite(inv_r3)] = 0.0

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r2, inv_r3

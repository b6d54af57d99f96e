"""Jacobi elliptic helpers for elliptic filter design.

The degree equation and the inverse Jacobi ``sc`` function follow the
nome-based formulation used by ``scipy.signal.ellipap``.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import special

# Number of terms in the nome series of the degree equation
_ELLIPDEG_MMAX = 7


def elliptic_degree(n: int, m1: float) -> float:
    """Solve the degree equation for the selectivity parameter m.

    Given n and m1, solve ``n * K(m) / K'(m) = K(m1) / K'(m1)`` for m
    using the nome q.
    """
    K1 = special.ellipk(m1)
    K1p = special.ellipkm1(m1)

    q1 = np.exp(-np.pi * K1p / K1)
    q = q1 ** (1 / n)

    mnum = np.arange(_ELLIPDEG_MMAX + 1)
    mden = np.arange(1, _ELLIPDEG_MMAX + 2)

    num = np.sum(q ** (mnum * (mnum + 1)))
    den = 1 + 2 * np.sum(q ** (mden**2))

    return float(16 * q * (num / den) ** 4)


def inverse_jacobi_sc1(w: float, m: float) -> float:
    """Real inverse Jacobi sc with complementary parameter.

    Solve ``w = sc(z, 1 - m)`` for real z by Newton iteration, using
    ``d sc / dz = dn / cn**2``.
    """
    if m == 0:
        return math.atan(w)
    if m == 1:
        return math.asinh(w)

    z = math.atan(w)

    for _ in range(50):
        sn, cn, dn, _ = special.ellipj(z, 1 - m)
        if abs(cn) < 1e-15:
            break

        err = sn / cn - w
        if abs(err) < 1e-14:
            break

        z = z - err * cn * cn / dn

    return z

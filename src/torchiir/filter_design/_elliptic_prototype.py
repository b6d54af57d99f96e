"""Elliptic (Cauer) analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import numpy as np
import torch
from scipy import special
from torch import Tensor

from ._dtypes import resolve_dtypes
from ._elliptic_functions import elliptic_degree, inverse_jacobi_sc1

# Threshold below which sn values and imaginary parts are treated as zero
_EPSILON = 2e-16


def elliptic_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog elliptic (Cauer) lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog elliptic
    lowpass filter whose equiripple passband ends at 1 rad/s.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be positive.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter on the imaginary axis, complex tensor of shape
        (2 * (order // 2),).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor.

    Notes
    -----
    The elliptic filter has an equiripple passband and an equiripple
    stopband, giving the sharpest transition band for a given order.
    For odd order there is one real pole and ``order - 1`` zeros.

    References
    ----------
    .. [1] A. J. Grossman, "Synthesis of Tchebycheff Parameter Symmetrical
           Filters," Proceedings of the IRE, vol. 45, no. 4,
           pp. 454-473, 1957.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise ValueError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )
    if stopband_attenuation_db <= 0:
        raise ValueError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}"
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    eps_sq = 10.0 ** (0.1 * passband_ripple_db) - 1.0

    if order == 1:
        p = -math.sqrt(1.0 / eps_sq)
        zeros = torch.empty(0, dtype=complex_dtype, device=device)
        poles = torch.tensor([p], dtype=complex_dtype, device=device)
        gain = torch.tensor(-p, dtype=dtype, device=device)
        return zeros, poles, gain

    eps = math.sqrt(eps_sq)

    ck1_sq = eps_sq / (10.0 ** (0.1 * stopband_attenuation_db) - 1.0)
    if ck1_sq == 0:
        raise ValueError("Cannot design filter with given rp and rs specs")

    m = elliptic_degree(order, ck1_sq)
    capk = special.ellipk(m)

    # j = 1, 3, 5, ... for even order; 0, 2, 4, ... for odd order
    j = np.arange(1 - order % 2, order, 2)
    s, c, d, _ = special.ellipj(j * capk / order, m * np.ones(len(j)))

    z = 1j / (np.sqrt(m) * s[np.abs(s) > _EPSILON])
    z = np.concatenate([z, np.conjugate(z)])

    r = inverse_jacobi_sc1(1.0 / eps, ck1_sq)
    v0 = capk * r / (order * special.ellipk(ck1_sq))
    sv, cv, dv, _ = special.ellipj(v0, 1 - m)

    p = -(c * d * sv * cv + 1j * s * dv) / (1 - (d * sv) ** 2.0)

    if order % 2 == 1:
        complex_p = p[np.abs(p.imag) > _EPSILON * np.sqrt(np.sum(np.abs(p) ** 2))]
        p = np.concatenate([p, np.conjugate(complex_p)])
    else:
        p = np.concatenate([p, np.conjugate(p)])

    k = (np.prod(-p) / np.prod(-z)).real
    if order % 2 == 0:
        k = k / math.sqrt(1 + eps_sq)

    zeros = torch.from_numpy(z.astype(np.complex128)).to(device, complex_dtype)
    poles = torch.from_numpy(p.astype(np.complex128)).to(device, complex_dtype)
    gain = torch.tensor(float(k), dtype=dtype, device=device)

    return zeros, poles, gain

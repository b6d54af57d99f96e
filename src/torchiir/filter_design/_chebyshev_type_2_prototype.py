"""Chebyshev Type II analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Chebyshev Type II lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Chebyshev
    Type II (inverse Chebyshev) lowpass filter whose equiripple stopband
    begins at 1 rad/s.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
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
        System gain normalizing the DC response to 1.

    Notes
    -----
    The zeros are :math:`\\pm j / \\cos(\\theta_k)` with
    :math:`\\theta_k = \\pi (2k + 1) / (2n)`. For odd order the middle
    angle gives a zero at infinity, so there are ``order - 1`` finite
    zeros. The poles are the reciprocals of Chebyshev Type I poles
    designed for ripple :math:`1/\\sqrt{10^{R_s/10} - 1}`.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if stopband_attenuation_db <= 0:
        raise ValueError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}"
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    a = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + 1) / (2 * order)

    poles = 1.0 / torch.complex(
        -math.sinh(a) * torch.sin(theta),
        math.cosh(a) * torch.cos(theta),
    )

    # Skip the middle angle of an odd order filter (cos(theta) = 0)
    cos_theta = torch.cos(theta)
    if order % 2 == 1:
        mid = order // 2
        cos_theta = torch.cat([cos_theta[:mid], cos_theta[mid + 1 :]])

    zeros = torch.complex(torch.zeros_like(cos_theta), 1.0 / cos_theta)

    gain = torch.prod(-poles) / torch.prod(-zeros)

    return zeros.to(complex_dtype), poles.to(complex_dtype), gain.real.to(dtype)

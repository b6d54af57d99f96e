"""Chebyshev Type I analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Chebyshev Type I lowpass filter prototype.

    The passband ripples between 0 and ``-passband_ripple_db`` dB up to
    1 rad/s; the stopband falls off monotonically.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    passband_ripple_db : float
        Peak-to-peak passband ripple in dB. Must be positive.
    dtype : torch.dtype, optional
        Real dtype of the gain; the roots use the matching complex dtype.
        Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty complex tensor (all-pole filter).
    poles : Tensor
        The ``order`` poles, on an ellipse in the left half-plane.
    gain : Tensor
        Gain placing DC at 0 dB for odd order and at the bottom of the
        ripple for even order.

    Notes
    -----
    With :math:`\\epsilon^2 = 10^{R_p/10} - 1`,
    :math:`\\mu = \\operatorname{arcsinh}(1/\\epsilon) / n` and
    :math:`\\theta_k = \\pi (2k + 1) / (2n)`,

    .. math::
        p_k = -\\sinh(\\mu) \\sin(\\theta_k) + j \\cosh(\\mu) \\cos(\\theta_k)
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise ValueError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    eps_sq = 10 ** (passband_ripple_db / 10) - 1
    mu = math.asinh(1.0 / math.sqrt(eps_sq)) / order

    theta = (
        math.pi
        * (2 * torch.arange(order, dtype=torch.float64, device=device) + 1)
        / (2 * order)
    )

    poles = torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * torch.cos(theta),
    )

    gain = torch.prod(-poles).real
    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps_sq)

    return (
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(complex_dtype),
        gain.to(dtype),
    )

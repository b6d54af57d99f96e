"""Butterworth analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes


def butterworth_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Butterworth lowpass filter prototype.

    The magnitude response is maximally flat at DC and falls to -3 dB at
    1 rad/s for every order.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    dtype : torch.dtype, optional
        Real dtype of the gain; the roots use the matching complex dtype.
        Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty complex tensor; every zero is at infinity.
    poles : Tensor
        The ``order`` left half-plane poles, ordered by angle.
    gain : Tensor
        Unit gain, 0-d.

    Notes
    -----
    With :math:`\\theta_k = \\pi (2k + 1) / (2n)` the poles are

    .. math::
        p_k = -\\sin(\\theta_k) + j \\cos(\\theta_k)

    which is the unit-radius limit of the Chebyshev Type I pole ellipse.

    References
    ----------
    .. [1] S. Butterworth, "On the Theory of Filter Amplifiers,"
           Wireless Engineer, vol. 7, pp. 536-541, 1930.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")

    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    theta = (
        math.pi
        * (2 * torch.arange(order, dtype=torch.float64, device=device) + 1)
        / (2 * order)
    )

    poles = torch.complex(-torch.sin(theta), torch.cos(theta))

    # cos(pi / 2) is not exactly zero
    if order % 2 == 1:
        poles[order // 2] = -1.0

    return (
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(complex_dtype),
        torch.ones((), dtype=dtype, device=device),
    )

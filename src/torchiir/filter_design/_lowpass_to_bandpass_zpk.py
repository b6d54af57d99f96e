"""Lowpass to bandpass transform for digital filters."""

import math
from typing import Tuple

import torch
from torch import Tensor


def lowpass_to_bandpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    center_frequency: float,
) -> Tuple[Tensor, Tensor]:
    """
    Transform a digital lowpass filter to a digital bandpass filter.

    Each lowpass root x is replaced by the two roots of

    .. math::
        z^2 - c_0 (1 + x) z + x = 0, \\qquad c_0 = \\cos(2 \\pi f_0)

    Parameters
    ----------
    zeros : Tensor
        Zeros of the digital lowpass filter.
    poles : Tensor
        Poles of the digital lowpass filter.
    center_frequency : float
        Center frequency, normalized so that 0.5 is the Nyquist frequency.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the bandpass filter, length ``2 * len(zeros)``.
    poles_new : Tensor
        Poles of the bandpass filter, length ``2 * len(poles)``.

    Notes
    -----
    - Doubles the filter order
    - Maps the lowpass response at z=1 to the center frequency, so the
      gain is unchanged
    - The two roots generated from each lowpass root are stored next to
      each other; they are not conjugates in general, so callers that need
      conjugate pairs must re-sort them (see ``conjugate_pair_sort``)
    """
    c0 = math.cos(2 * math.pi * center_frequency)

    return _quadratic_roots(zeros, c0), _quadratic_roots(poles, c0)


def _quadratic_roots(x: Tensor, c0: float) -> Tensor:
    """Solve z^2 - c0*(1+x)*z + x = 0 for every x, interleaving the roots."""
    x = x.to(torch.promote_types(x.dtype, torch.complex64))

    t = 1 + x
    sqrt_disc = torch.sqrt(c0 * c0 * t * t - 4 * x)

    roots_plus = 0.5 * (c0 * t + sqrt_disc)
    roots_minus = 0.5 * (c0 * t - sqrt_disc)

    return torch.stack([roots_plus, roots_minus], dim=-1).reshape(-1)

"""Bessel/Thomson analog lowpass filter prototype."""

import math
from typing import List, Literal, Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes
from ._polynomial_roots import polynomial_roots


def bessel_prototype(
    order: int,
    normalization: Literal["phase", "delay", "magnitude"] = "phase",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Bessel/Thomson lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Bessel lowpass
    filter. Bessel filters have maximally flat group delay.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    normalization : {"phase", "delay", "magnitude"}, default "phase"
        Frequency normalization method:

        - "phase": the high-frequency asymptote matches a Butterworth
          filter, so the phase response at 1 rad/s is close to -45 degrees
          times the order (the scipy default).
        - "delay": the group delay at DC is 1 second.
        - "magnitude": the magnitude response at 1 rad/s is -3 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (empty for Bessel).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain giving unity DC response.

    Notes
    -----
    The poles are the roots of the reverse Bessel polynomial

    .. math::
        \\theta_n(s) = \\sum_{k=0}^{n} \\frac{(2n - k)!}{2^{n-k} k! (n-k)!} s^k

    scaled according to ``normalization``.
    """
    if order < 1:
        raise ValueError(f"Filter order must be positive, got {order}")
    if normalization not in ("phase", "delay", "magnitude"):
        raise ValueError(
            f"normalization must be 'phase', 'delay', or 'magnitude', got '{normalization}'"
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    coeffs = _bessel_polynomial_coefficients(order)
    poles = polynomial_roots(
        torch.tensor(coeffs[::-1], dtype=torch.float64, device=device)
    )

    if normalization == "phase":
        poles = poles * _phase_normalization(poles.tolist(), order)
    elif normalization == "delay":
        poles = poles * _delay_normalization(poles.tolist())
    else:
        poles = poles * _magnitude_normalization(poles.tolist())

    zeros = torch.empty(0, dtype=complex_dtype, device=device)

    gain = torch.prod(-poles).real

    return zeros, poles.to(complex_dtype), gain.to(dtype)


def _bessel_polynomial_coefficients(n: int) -> List[float]:
    """Coefficients [a_0, ..., a_n] of the reverse Bessel polynomial."""
    return [
        math.factorial(2 * n - k)
        / (2 ** (n - k) * math.factorial(k) * math.factorial(n - k))
        for k in range(n + 1)
    ]


def _phase_normalization(poles: List[complex], order: int) -> float:
    """Scale factor giving the poles a geometric mean magnitude of 1."""
    magnitude = 1.0
    for p in poles:
        magnitude *= abs(p)

    return magnitude ** (-1.0 / order)


def _delay_normalization(poles: List[complex]) -> float:
    """Scale factor giving unit group delay at DC.

    The group delay at DC is -sum(Re(p) / |p|^2).
    """
    return -sum(p.real / abs(p) ** 2 for p in poles)


def _magnitude_normalization(poles: List[complex]) -> float:
    """Scale factor placing the -3 dB point at 1 rad/s.

    |H(jw)|^2 = prod|p|^2 / prod|jw - p|^2 decreases monotonically, so the
    half-power frequency is found by bisection.
    """

    def magnitude_squared(w: float) -> float:
        result = 1.0
        for p in poles:
            result *= abs(p) ** 2 / abs(1j * w - p) ** 2
        return result

    low, high = 0.0, 1.0
    while magnitude_squared(high) > 0.5:
        low, high = high, 2 * high

    for _ in range(200):
        mid = 0.5 * (low + high)
        if mid in (low, high):
            break
        if magnitude_squared(mid) > 0.5:
            low = mid
        else:
            high = mid

    return 1.0 / (0.5 * (low + high))

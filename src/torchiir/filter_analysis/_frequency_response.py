"""Frequency response computation for transfer function filters."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_response(
    numerator: Tensor,
    denominator: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of a digital filter (transfer function form).

    Parameters
    ----------
    numerator : Tensor
        Numerator coefficients ``b`` in ascending powers of z^-1.
    denominator : Tensor
        Denominator coefficients ``a`` in ascending powers of z^-1.
    frequencies : Tensor or int, default 512
        If int: number of frequency points, evenly spaced from 0 up to (not
        including) 0.5, or 1.0 if ``whole`` is True.
        If Tensor: frequency points, normalized so that 0.5 is the Nyquist
        frequency.
    whole : bool, default False
        If True and ``frequencies`` is int, cover the whole unit circle.
    dtype : torch.dtype, optional
        Complex output dtype. Defaults to complex128 for float64 input and
        complex64 otherwise.

    Returns
    -------
    frequencies : Tensor
        Normalized frequency points.
    response : Tensor
        Complex frequency response :math:`H(e^{j 2 \\pi f})`.

    Notes
    -----
    .. math::
        H(e^{j\\omega}) = \\frac{\\sum_{k=0}^{N} b_k e^{-j\\omega k}}
                               {\\sum_{k=0}^{M} a_k e^{-j\\omega k}}

    For high-order filters prefer ``frequency_response_sos``.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_analysis import frequency_response
    >>> b = torch.tensor([1.0, 1.0])
    >>> a = torch.tensor([1.0, -0.5])
    >>> freqs, response = frequency_response(b, a, torch.tensor([0.0]))
    >>> response.abs()
    tensor([4.])
    """
    if dtype is None:
        if numerator.dtype == torch.float64:
            dtype = torch.complex128
        else:
            dtype = torch.complex64

    freq_points = _frequency_points(frequencies, whole, numerator.device)

    z_inv = torch.exp(-2j * math.pi * freq_points)

    num = _polyval_ascending(numerator.to(torch.complex128), z_inv)
    den = _polyval_ascending(denominator.to(torch.complex128), z_inv)

    return freq_points.to(numerator.dtype), (num / den).to(dtype)


def _frequency_points(
    frequencies: Union[Tensor, int],
    whole: bool,
    device: torch.device,
) -> Tensor:
    if isinstance(frequencies, int):
        max_freq = 1.0 if whole else 0.5

        # endpoint=False, as scipy.signal.freqz
        return torch.linspace(
            0, max_freq, frequencies + 1, dtype=torch.float64, device=device
        )[:-1]

    return frequencies.to(dtype=torch.float64, device=device)


def _polyval_ascending(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate c0 + c1*x + c2*x^2 + ... with Horner's method."""
    result = torch.zeros_like(x, dtype=coeffs.dtype)
    for c in reversed(coeffs):
        result = result * x + c

    return result

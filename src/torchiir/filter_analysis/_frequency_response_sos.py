"""Frequency response computation for second-order section filters."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._frequency_response import _frequency_points


def frequency_response_sos(
    numerator: Tensor,
    denominator: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of a cascade of second-order sections.

    More numerically stable than ``frequency_response`` for high-order
    filters.

    Parameters
    ----------
    numerator : Tensor
        Section numerators ``B``, shape (n_sections, 3).
    denominator : Tensor
        Section denominators ``A``, shape (n_sections, 3).
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
        Complex frequency response, the product of the section responses

        .. math::
            H_k(z) = \\frac{b_{k0} + b_{k1} z^{-1} + b_{k2} z^{-2}}
                          {a_{k0} + a_{k1} z^{-1} + a_{k2} z^{-2}}

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import iir_design
    >>> from torchiir.filter_analysis import frequency_response_sos
    >>> B, A = iir_design(4, 0.2, dtype=torch.float64)
    >>> freqs, response = frequency_response_sos(B, A)
    >>> magnitude_db = 20 * torch.log10(torch.abs(response))
    """
    if numerator.shape != denominator.shape or numerator.dim() != 2:
        raise ValueError(
            f"Section coefficients must both have shape (n_sections, 3), "
            f"got {tuple(numerator.shape)} and {tuple(denominator.shape)}"
        )

    if dtype is None:
        if numerator.dtype == torch.float64:
            dtype = torch.complex128
        else:
            dtype = torch.complex64

    freq_points = _frequency_points(frequencies, whole, numerator.device)

    z_inv = torch.exp(-2j * math.pi * freq_points)

    response = torch.ones_like(z_inv)
    for b, a in zip(numerator.to(torch.float64), denominator.to(torch.float64)):
        num = b[0] + b[1] * z_inv + b[2] * z_inv**2
        den = a[0] + a[1] * z_inv + a[2] * z_inv**2
        response = response * (num / den)

    return freq_points.to(numerator.dtype), response.to(dtype)

"""Stability check for digital IIR filters."""

import torch
from torch import Tensor

from ._polynomial_roots import polynomial_roots


def iir_is_stable(numerator: Tensor, denominator: Tensor) -> bool:
    """
    Check whether a digital IIR filter is stable.

    Parameters
    ----------
    numerator : Tensor
        Transfer function numerator ``b`` of shape (n + 1,), or section
        numerators ``B`` of shape (n_sections, 3).
    denominator : Tensor
        Transfer function denominator ``a`` of shape (n + 1,), or section
        denominators ``A`` of shape (n_sections, 3).

    Returns
    -------
    stable : bool
        True if every pole lies strictly inside the unit circle.

    Notes
    -----
    The numerator does not affect stability; it is accepted so that both
    coefficient formats returned by ``iir_design`` can be passed as-is.
    Trailing zero coefficients (first-order sections) are removed before
    the roots are computed.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import iir_design, iir_is_stable
    >>> iir_is_stable(*iir_design(6, 0.1, output="ba"))
    True
    """
    if numerator.dim() != denominator.dim():
        raise ValueError(
            f"numerator and denominator must have the same number of "
            f"dimensions, got {numerator.dim()} and {denominator.dim()}"
        )

    sections = denominator if denominator.dim() == 2 else denominator[None]

    for a in sections:
        if a[0] == 0:
            raise ValueError("Leading denominator coefficient must be non-zero")

        nonzero = torch.nonzero(a).flatten()
        poles = polynomial_roots(a[: int(nonzero[-1]) + 1])

        if poles.numel() > 0 and not bool((poles.abs() < 1).all()):
            return False

    return True

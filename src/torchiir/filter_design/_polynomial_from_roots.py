"""Expansion of polynomial roots into coefficients."""

import torch
from torch import Tensor


def polynomial_from_roots(roots: Tensor) -> Tensor:
    """
    Build monic polynomial coefficients from roots.

    Computes the coefficients of :math:`(x - r_0)(x - r_1) \\cdots (x - r_{n-1})`.

    Parameters
    ----------
    roots : Tensor
        Roots of the polynomial, shape (n,).

    Returns
    -------
    coeffs : Tensor
        Complex polynomial coefficients in descending order
        [x^n, x^(n-1), ..., x^0], shape (n + 1,). The leading
        coefficient is 1.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import polynomial_from_roots
    >>> polynomial_from_roots(torch.tensor([1.0, 2.0]))
    tensor([ 1.+0.j, -3.+0.j,  2.+0.j])
    """
    complex_dtype = torch.promote_types(roots.dtype, torch.complex64)
    roots = roots.to(complex_dtype)

    coeffs = torch.ones(1, dtype=complex_dtype, device=roots.device)

    # Multiply by each (x - r)
    for r in roots:
        shifted = torch.cat([coeffs, coeffs.new_zeros(1)])
        scaled = torch.cat([coeffs.new_zeros(1), coeffs * r])
        coeffs = shifted - scaled

    return coeffs

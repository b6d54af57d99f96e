import torch
from torch import Tensor


def polynomial_roots(coeffs: Tensor) -> Tensor:
    """Find roots of a polynomial using its companion matrix.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in descending order [c_n, ..., c_0].
        The leading coefficient must be non-zero.

    Returns
    -------
    roots : Tensor
        Complex roots of the polynomial, shape (n,).
    """
    coeffs = coeffs.to(torch.complex128)
    n = coeffs.numel() - 1
    if n <= 0:
        return torch.zeros(0, dtype=torch.complex128, device=coeffs.device)

    # Normalize to monic polynomial
    coeffs = coeffs / coeffs[0]

    companion = torch.zeros(
        (n, n), dtype=torch.complex128, device=coeffs.device
    )
    if n > 1:
        companion[1:, :-1] = torch.eye(
            n - 1, dtype=torch.complex128, device=coeffs.device
        )
    companion[:, -1] = -coeffs[1:].flip(0)

    return torch.linalg.eigvals(companion)

"""Conversion from zeros-poles-gain to transfer function coefficients."""

from typing import Tuple

import torch
from torch import Tensor

from ._exceptions import InvalidOrderError
from ._polynomial_from_roots import polynomial_from_roots


def zpk_to_ba(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
) -> Tuple[Tensor, Tensor]:
    """Convert digital zeros, poles, gain to transfer function coefficients.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the digital filter, same length as ``poles``.
    poles : Tensor
        Poles of the digital filter.
    gain : Tensor
        Gain of the digital filter (real or complex).

    Returns
    -------
    numerator : Tensor
        Numerator coefficients ``b``, shape (n + 1,).
    denominator : Tensor
        Denominator coefficients ``a``, shape (n + 1,), with ``a[0] = 1``.

    Notes
    -----
    The transfer function is:

    .. math::
        H(z) = k \\frac{\\prod_i (1 - z_i z^{-1})}{\\prod_i (1 - p_i z^{-1})}
             = \\frac{b_0 + b_1 z^{-1} + \\cdots + b_n z^{-n}}
                     {a_0 + a_1 z^{-1} + \\cdots + a_n z^{-n}}

    Only real parts are returned; imaginary parts vanish for roots that
    come in conjugate pairs.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import zpk_to_ba
    >>> zeros = torch.tensor([-1.0 + 0j])
    >>> poles = torch.tensor([0.5 + 0j])
    >>> b, a = zpk_to_ba(zeros, poles, torch.tensor(0.25))
    >>> b, a
    (tensor([0.2500, 0.2500]), tensor([ 1.0000, -0.5000]))
    """
    if zeros.numel() != poles.numel():
        raise InvalidOrderError(
            f"Digital filter must have as many zeros as poles, got "
            f"{zeros.numel()} zeros and {poles.numel()} poles"
        )

    a = polynomial_from_roots(poles)
    b = polynomial_from_roots(zeros) * torch.as_tensor(
        gain, dtype=a.dtype, device=a.device
    )

    return b.real, a.real

"""Conversion from zeros-poles-gain to second-order sections."""

from typing import Tuple

import torch
from torch import Tensor

from ._constants import CONJUGATE_PAIR_TOLERANCE
from ._conjugate_pair_sort import conjugate_pair_sort
from ._exceptions import InvalidOrderError


def zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    tolerance: float = CONJUGATE_PAIR_TOLERANCE,
) -> Tuple[Tensor, Tensor]:
    """
    Convert digital zeros, poles, and gain to second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the digital filter, same length as ``poles``.
    poles : Tensor
        Poles of the digital filter.
    gain : Tensor
        Gain of the digital filter (real or complex).
    tolerance : float
        Conjugate pairing tolerance, relative to the largest root
        magnitude (or 1, whichever is larger).

    Returns
    -------
    numerator : Tensor
        Section numerators ``B``, shape (L + r, 3). Each row is
        [b0, b1, b2].
    denominator : Tensor
        Section denominators ``A``, shape (L + r, 3). Each row is
        [1, a1, a2].

    Notes
    -----
    With filter order ``n = 2 * L + r``, the first ``L`` sections are
    built from consecutive entries of the conjugate-pair sorted roots,
    and an odd order adds a trailing first-order section built from the
    remaining real pole and zero.

    The whole gain is applied to the numerator of the first section; the
    leading numerator coefficient of every other section is 1.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import iir_design
    >>> numerator, denominator = iir_design(5, 0.1, output="sos")
    >>> numerator.shape, denominator.shape
    (torch.Size([3, 3]), torch.Size([3, 3]))
    """
    n = poles.numel()

    if zeros.numel() != n:
        raise InvalidOrderError(
            f"Digital filter must have as many zeros as poles, got "
            f"{zeros.numel()} zeros and {n} poles"
        )

    r = n % 2
    L = n // 2

    real_dtype = poles.real.dtype

    zeros_sorted = conjugate_pair_sort(zeros, _scaled(tolerance, zeros))
    poles_sorted = conjugate_pair_sort(poles, _scaled(tolerance, poles))

    # Expand pairs: (1 - q0 z^-1)(1 - q1 z^-1) = 1 - (q0 + q1) z^-1 + q0 q1 z^-2
    z0 = -zeros_sorted[0 : 2 * L : 2]
    z1 = -zeros_sorted[1 : 2 * L : 2]
    p0 = -poles_sorted[0 : 2 * L : 2]
    p1 = -poles_sorted[1 : 2 * L : 2]

    ones = torch.ones(L, dtype=real_dtype, device=poles.device)

    numerator = torch.stack([ones, (z0 + z1).real, (z0 * z1).real], dim=-1)
    denominator = torch.stack([ones, (p0 + p1).real, (p0 * p1).real], dim=-1)

    if r:
        # Leftovers are real to within tolerance; drop the residue
        numerator_first_order = torch.tensor(
            [1.0, -zeros_sorted[n - 1].real.item(), 0.0],
            dtype=real_dtype,
            device=poles.device,
        )
        denominator_first_order = torch.tensor(
            [1.0, -poles_sorted[n - 1].real.item(), 0.0],
            dtype=real_dtype,
            device=poles.device,
        )
        numerator = torch.cat([numerator, numerator_first_order[None]])
        denominator = torch.cat(
            [denominator, denominator_first_order[None]]
        )

    # Apply gain to first section only
    gain_real = torch.as_tensor(
        gain,
        dtype=torch.promote_types(real_dtype, torch.complex64),
        device=poles.device,
    ).real
    scale = torch.ones(L + r, 1, dtype=real_dtype, device=poles.device)
    if L + r > 0:
        scale[0, 0] = gain_real

    return numerator * scale, denominator


def _scaled(tolerance: float, roots: Tensor) -> float:
    """Scale the pairing tolerance to the magnitude of the roots."""
    if roots.numel() == 0:
        return tolerance

    return tolerance * max(1.0, roots.abs().max().item())

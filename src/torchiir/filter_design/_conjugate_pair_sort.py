"""Sorting of complex values into complex conjugate pairs."""

import warnings
from typing import List

import torch
from torch import Tensor

from ._constants import CONJUGATE_PAIR_TOLERANCE
from ._exceptions import ConjugatePairWarning, InvalidToleranceError


def conjugate_pair_sort(
    values: Tensor,
    tolerance: float = CONJUGATE_PAIR_TOLERANCE,
) -> Tensor:
    """
    Sort complex values into complex conjugate pairs.

    Conjugate pairs are placed first, ordered by increasing real part with
    the negative-imaginary element of each pair first. Values without a
    conjugate partner are placed last, ordered by increasing real part.

    Parameters
    ----------
    values : Tensor
        One-dimensional complex tensor.
    tolerance : float
        Absolute tolerance used both to decide whether a value is real and
        to match the real and imaginary parts of a candidate pair.

    Returns
    -------
    sorted_values : Tensor
        Complex tensor with the same length and device as ``values``.
        Real inputs are promoted to the matching complex dtype.

    Raises
    ------
    InvalidToleranceError
        If ``tolerance`` is negative.

    Warns
    -----
    ConjugatePairWarning
        If a value with a significant imaginary part has no conjugate
        partner. The value is kept and placed with the real values.

    Notes
    -----
    Every matched pair is made an exact conjugate pair, which removes the
    floating-point asymmetry accumulated by upstream transforms.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import conjugate_pair_sort
    >>> v = torch.tensor([10 + 3j, 5, -3 + 4j, 10 - 3j, 3, -3 - 4j])
    >>> conjugate_pair_sort(v)
    tensor([-3.-4.j, -3.+4.j, 10.-3.j, 10.+3.j,  3.+0.j,  5.+0.j])
    """
    if tolerance < 0:
        raise InvalidToleranceError(
            f"Tolerance must be non-negative, got {tolerance}"
        )

    if not values.is_complex():
        values = torch.complex(values, torch.zeros_like(values))

    z = values.tolist()
    n = len(z)

    paired = [False] * n
    ordered: List[complex] = []
    num_pairs = 0

    for i in range(n):
        if paired[i] or abs(z[i].imag) <= tolerance:
            continue

        for j in range(i + 1, n):
            if paired[j] or abs(z[j].imag) <= tolerance:
                continue

            if (
                abs(z[i].imag + z[j].imag) <= tolerance
                and abs(z[i].real - z[j].real) <= tolerance
            ):
                ordered.append(z[i])
                ordered.append(z[j])
                paired[i] = True
                paired[j] = True
                num_pairs += 1
                break

    for i in range(n):
        if paired[i]:
            continue

        if abs(z[i].imag) > tolerance:
            warnings.warn(
                f"Complex value {z[i]} has no conjugate partner within "
                f"tolerance {tolerance}; treating it as real",
                ConjugatePairWarning,
                stacklevel=2,
            )

        ordered.append(z[i])

    ordered_tensor = torch.tensor(
        ordered, dtype=values.dtype, device=values.device
    )

    return conjugate_pair_cleanup(ordered_tensor, num_pairs)


def conjugate_pair_cleanup(values: Tensor, num_pairs: int) -> Tensor:
    """
    Canonicalize values already grouped into conjugate pairs.

    Parameters
    ----------
    values : Tensor
        Complex tensor whose first ``2 * num_pairs`` elements are
        (approximate) conjugate pairs and whose remaining elements are
        (approximately) real.
    num_pairs : int
        Number of conjugate pairs at the front of ``values``.

    Returns
    -------
    cleaned : Tensor
        New tensor in which:

        - pairs are exact conjugates,
        - the negative-imaginary element of each pair comes first,
        - pairs are ordered by increasing real part,
        - real values are ordered by increasing real part.
    """
    n = values.numel()
    if 2 * num_pairs > n:
        raise ValueError(
            f"Cannot take {num_pairs} pairs from {n} values"
        )

    pairs = values[: 2 * num_pairs : 2]
    pairs = torch.where(pairs.imag < 0, pairs, pairs.conj())

    # Stable so equal real parts keep their pairing order
    order = torch.sort(pairs.real, stable=True).indices
    pairs = pairs[order]

    reals = values[2 * num_pairs :]
    reals = reals[torch.sort(reals.real, stable=True).indices]

    interleaved = torch.stack([pairs, pairs.conj()], dim=-1).reshape(-1)

    return torch.cat([interleaved, reals])

"""Bilinear transform for analog to digital filter conversion."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._exceptions import InvalidOrderError


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Union[complex, float, Tensor],
    warp_factor: float,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform a normalized analog filter to a digital filter.

    Each analog root s is mapped to the z-plane with the pre-warped
    bilinear transform:

    .. math::
        z = \\frac{1 + m s}{1 - m s}

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass prototype (at most ``len(poles)``).
    poles : Tensor
        Poles of the analog lowpass prototype. Their number is the filter
        order.
    gain : complex, float or Tensor
        Nominal gain of the digital filter. This is the desired response
        at the passband reference frequency, not the analog gain.
    warp_factor : float
        Frequency pre-warping factor ``m`` (see ``frequency_prewarp``).

    Returns
    -------
    zeros_digital : Tensor
        Zeros of the digital filter, same length as ``poles``.
    poles_digital : Tensor
        Poles of the digital filter.
    gain_digital : Tensor
        Complex gain of the digital filter.

    Notes
    -----
    - Maps the left half-plane (stable analog) inside the unit circle
      (stable digital) for every ``m > 0``
    - Analog zeros at infinity become digital zeros at z=-1
    - The gain is accumulated from the digital roots as
      ``gain * prod((1 - p_d) / (1 - z_d))``, which fixes the response at
      z=1 to ``gain``
    """
    n = poles.numel()
    n_zeros = zeros.numel()

    if n_zeros > n:
        raise InvalidOrderError(
            f"Analog filter has more zeros ({n_zeros}) than poles ({n})"
        )

    complex_dtype = torch.promote_types(poles.dtype, torch.complex64)

    poles = poles.to(complex_dtype)
    zeros = zeros.to(device=poles.device, dtype=complex_dtype)

    # Transform poles: z = (1 + m*s) / (1 - m*s)
    pm = poles * warp_factor
    poles_digital = (1 + pm) / (1 - pm)

    # Transform existing zeros
    zm = zeros * warp_factor
    zeros_transformed = (1 + zm) / (1 - zm)

    # Add zeros at z=-1 (Nyquist) for zeros at infinity
    zeros_at_nyquist = -torch.ones(
        n - n_zeros, dtype=complex_dtype, device=poles.device
    )
    zeros_digital = torch.cat([zeros_transformed, zeros_at_nyquist])

    gain = torch.as_tensor(gain, dtype=complex_dtype, device=poles.device)
    gain_digital = gain * torch.prod((1 - poles_digital) / (1 - zeros_digital))

    return zeros_digital, poles_digital, gain_digital

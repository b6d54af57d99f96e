"""Lowpass to highpass transform for digital filters."""

from typing import Tuple

from torch import Tensor


def lowpass_to_highpass_zpk(
    zeros: Tensor,
    poles: Tensor,
) -> Tuple[Tensor, Tensor]:
    """
    Transform a digital lowpass filter to a digital highpass filter.

    Performs the z-plane substitution z -> -z, which reflects the lowpass
    response about a quarter of the sampling frequency.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the digital lowpass filter.
    poles : Tensor
        Poles of the digital lowpass filter.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the highpass filter (negated lowpass zeros).
    poles_new : Tensor
        Poles of the highpass filter (negated lowpass poles).

    Notes
    -----
    The gain is unchanged: the highpass response at z=-1 equals the
    lowpass response at z=1. The lowpass prototype must be designed with
    the highpass pre-warping factor so the reflected cutoff lands at the
    requested frequency.
    """
    return -zeros, -poles

"""Lowpass to bandstop transform for digital filters."""

from typing import Tuple

from torch import Tensor

from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk


def lowpass_to_bandstop_zpk(
    zeros: Tensor,
    poles: Tensor,
    center_frequency: float,
) -> Tuple[Tensor, Tensor]:
    """
    Transform a digital lowpass filter to a digital bandstop filter.

    The lowpass roots are negated (lowpass to highpass) and the result is
    passed through the lowpass to bandpass transform.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the digital lowpass filter.
    poles : Tensor
        Poles of the digital lowpass filter.
    center_frequency : float
        Center of the stop band, normalized so that 0.5 is the Nyquist
        frequency.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the bandstop filter, length ``2 * len(zeros)``.
    poles_new : Tensor
        Poles of the bandstop filter, length ``2 * len(poles)``.
    """
    zeros_hp, poles_hp = lowpass_to_highpass_zpk(zeros, poles)

    return lowpass_to_bandpass_zpk(zeros_hp, poles_hp, center_frequency)

"""Frequency pre-warping factor for the bilinear transform."""

import math

from ._exceptions import InvalidCutoffError, InvalidFilterTypeError


def frequency_prewarp(
    band_type: str,
    cutoff_frequency: float,
    center_frequency: float = 0.0,
) -> float:
    """
    Compute the bilinear transform frequency pre-warping factor.

    Parameters
    ----------
    band_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        Band type of the digital filter being designed.
    cutoff_frequency : float
        Cutoff frequency, normalized so that 0.5 is the Nyquist frequency.
    center_frequency : float
        Center frequency for band-pass and band-stop designs, normalized
        the same way. Ignored for low-pass and high-pass designs.

    Returns
    -------
    m : float
        Positive pre-warping factor.

    Raises
    ------
    InvalidFilterTypeError
        If ``band_type`` is unknown.
    InvalidCutoffError
        If the factor is zero or not finite, which happens when the cutoff
        coincides with the center frequency.

    Notes
    -----
    The factors follow Constantinides' digital frequency transformations:

    - lowpass: :math:`\\tan(\\pi f_c)`
    - highpass: :math:`-\\cos(\\pi f_c) / \\sin(\\pi f_c)`
    - bandpass: :math:`(\\cos 2\\pi f_c - \\cos 2\\pi f_0) / \\sin 2\\pi f_c`
    - bandstop: :math:`\\sin 2\\pi f_c / (\\cos 2\\pi f_c - \\cos 2\\pi f_0)`

    The absolute value is returned.

    References
    ----------
    .. [1] A. G. Constantinides, "Frequency Transformations for Digital
           Filters," IEEE Electronics Letters, vol. 3, no. 11,
           pp. 487-489, 1967.
    """
    if band_type == "lowpass":
        m = math.tan(math.pi * cutoff_frequency)
    elif band_type == "highpass":
        m = -math.cos(math.pi * cutoff_frequency) / math.sin(
            math.pi * cutoff_frequency
        )
    elif band_type == "bandpass":
        m = (
            math.cos(2 * math.pi * cutoff_frequency)
            - math.cos(2 * math.pi * center_frequency)
        ) / math.sin(2 * math.pi * cutoff_frequency)
    elif band_type == "bandstop":
        denominator = math.cos(2 * math.pi * cutoff_frequency) - math.cos(
            2 * math.pi * center_frequency
        )
        if denominator == 0:
            raise InvalidCutoffError(
                f"Cutoff frequency {cutoff_frequency} coincides with center "
                f"frequency {center_frequency}"
            )
        m = math.sin(2 * math.pi * cutoff_frequency) / denominator
    else:
        raise InvalidFilterTypeError(f"Invalid band_type: {band_type}")

    m = abs(m)

    if m == 0 or not math.isfinite(m):
        raise InvalidCutoffError(
            f"Degenerate pre-warping factor {m} for {band_type} design with "
            f"cutoff frequency {cutoff_frequency} and center frequency "
            f"{center_frequency}"
        )

    return m

"""Digital IIR filter design from analog prototypes."""

from typing import Callable, Literal, Optional, Tuple

import torch
from torch import Tensor

from ._analog_prototype import analog_prototype
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._constants import BAND_TYPES, FILTER_TYPES, OUTPUT_FORMATS
from ._exceptions import (
    InvalidCutoffError,
    InvalidFilterTypeError,
    InvalidOrderError,
    SpecificationError,
)
from ._frequency_prewarp import frequency_prewarp
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos

_EMITTERS = {
    "ba": zpk_to_ba,
    "sos": zpk_to_sos,
}


def iir_design(
    order: int,
    cutoff_frequency: float,
    center_frequency: float = 0.0,
    passband_ripple_db: float = 1.0,
    stopband_attenuation_db: float = 40.0,
    filter_type: Literal[
        "butterworth",
        "chebyshev_type_1",
        "chebyshev_type_2",
        "elliptic",
        "bessel",
    ] = "butterworth",
    band_type: Literal[
        "lowpass", "highpass", "bandpass", "bandstop"
    ] = "lowpass",
    output: Literal["ba", "sos"] = "sos",
    *,
    trace: Optional[Callable[[str, Tensor], None]] = None,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Design a digital IIR filter from an analog lowpass prototype.

    The analog prototype is mapped to a digital lowpass prototype with a
    pre-warped bilinear transform, converted to the requested band type
    with digital frequency transformations, and emitted as a transfer
    function or a cascade of second-order sections.

    Parameters
    ----------
    order : int
        Order of the lowpass prototype. Must be positive. Bandpass and
        bandstop designs have twice this order.
    cutoff_frequency : float
        Cutoff frequency, normalized so that 0.5 is the Nyquist frequency.
        Must satisfy 0 < cutoff_frequency < 0.5. For Chebyshev Type II
        this is the stopband edge; for the other families it is the
        passband edge (Butterworth: -3 dB point).
    center_frequency : float
        Center frequency of bandpass and bandstop designs, normalized the
        same way. Must satisfy 0 <= center_frequency <= 0.5.
    passband_ripple_db : float
        Passband ripple in dB. Must be positive.
    stopband_attenuation_db : float
        Stopband attenuation in dB. Must be positive.
    filter_type : {"butterworth", "chebyshev_type_1", "chebyshev_type_2", "elliptic", "bessel"}
        Analog prototype family. Default is "butterworth".
    band_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        Band type. Default is "lowpass".
    output : {"ba", "sos"}
        Coefficient format:

        - "ba": transfer function numerator and denominator, each of
          length n + 1
        - "sos": second-order section numerators and denominators, each of
          shape (n // 2 + n % 2, 3) (default)

        where n is ``order`` for lowpass/highpass and ``2 * order`` for
        bandpass/bandstop.
    trace : callable, optional
        Called as ``trace(stage, value)`` with the intermediate values of
        each design stage. Stage names are "analog_zeros", "analog_poles",
        "analog_gain", "warp_factor", "digital_zeros", "digital_poles",
        "digital_gain", "zeros", "poles", "numerator" and "denominator".
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype(). The design
        itself is always carried out in double precision.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator : Tensor
        ``b`` (output="ba") or ``B`` (output="sos").
    denominator : Tensor
        ``a`` (output="ba") or ``A`` (output="sos").

    Raises
    ------
    InvalidOrderError
        If ``order`` is less than 1.
    InvalidCutoffError
        If ``cutoff_frequency`` or ``center_frequency`` is out of range,
        or they produce a degenerate pre-warping factor.
    SpecificationError
        If ``passband_ripple_db`` or ``stopband_attenuation_db`` is not
        positive.
    InvalidFilterTypeError
        If ``filter_type``, ``band_type`` or ``output`` is unknown.

    Warns
    -----
    ConjugatePairWarning
        If output="sos" and a complex root has no conjugate partner.

    Notes
    -----
    The digital gain is fixed so that the response at the passband
    reference frequency (DC for lowpass, Nyquist for highpass, the center
    frequency for bandpass, DC and Nyquist for bandstop) equals the
    nominal gain of the family: 1, or :math:`1/\\sqrt{1 + \\epsilon^2}`
    for even order Chebyshev Type I and elliptic filters.

    In SOS form the whole gain is applied to the numerator of the first
    section.

    Examples
    --------
    >>> import torch
    >>> from torchiir.filter_design import iir_design
    >>> B, A = iir_design(4, 0.2, dtype=torch.float64)
    >>> B.shape, A.shape
    (torch.Size([2, 3]), torch.Size([2, 3]))

    >>> b, a = iir_design(
    ...     3, 0.1, center_frequency=0.25, band_type="bandpass", output="ba"
    ... )
    >>> b.shape
    torch.Size([7])

    References
    ----------
    .. [1] A. G. Constantinides, "Frequency Transformations for Digital
           Filters," IEEE Electronics Letters, vol. 3, no. 11,
           pp. 487-489, 1967.
    """
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise InvalidOrderError(
            f"Filter order must be a positive integer, got {order}"
        )
    if not 0 < cutoff_frequency < 0.5:
        raise InvalidCutoffError(
            f"Cutoff frequency must satisfy 0 < cutoff_frequency < 0.5, "
            f"got {cutoff_frequency}"
        )
    if not 0 <= center_frequency <= 0.5:
        raise InvalidCutoffError(
            f"Center frequency must satisfy 0 <= center_frequency <= 0.5, "
            f"got {center_frequency}"
        )
    if passband_ripple_db <= 0:
        raise SpecificationError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )
    if stopband_attenuation_db <= 0:
        raise SpecificationError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}"
        )
    if filter_type not in FILTER_TYPES:
        raise InvalidFilterTypeError(f"Invalid filter_type: {filter_type}")
    if band_type not in BAND_TYPES:
        raise InvalidFilterTypeError(f"Invalid band_type: {band_type}")
    if output not in OUTPUT_FORMATS:
        raise InvalidFilterTypeError(f"Invalid output format: {output}")

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    if trace is None:
        trace = _no_trace

    warp_factor = frequency_prewarp(
        band_type, cutoff_frequency, center_frequency
    )

    zeros_analog, poles_analog, gain_analog, nominal_gain = analog_prototype(
        filter_type,
        order,
        passband_ripple_db,
        stopband_attenuation_db,
        dtype=torch.float64,
        device=device,
    )
    trace("analog_zeros", zeros_analog)
    trace("analog_poles", poles_analog)
    trace("analog_gain", gain_analog)
    trace("warp_factor", torch.tensor(warp_factor, dtype=torch.float64))

    zeros, poles, gain = bilinear_transform_zpk(
        zeros_analog, poles_analog, nominal_gain, warp_factor
    )
    trace("digital_zeros", zeros)
    trace("digital_poles", poles)
    trace("digital_gain", gain)

    if band_type == "highpass":
        zeros, poles = lowpass_to_highpass_zpk(zeros, poles)
    elif band_type == "bandpass":
        zeros, poles = lowpass_to_bandpass_zpk(zeros, poles, center_frequency)
    elif band_type == "bandstop":
        zeros, poles = lowpass_to_bandstop_zpk(zeros, poles, center_frequency)
    trace("zeros", zeros)
    trace("poles", poles)

    numerator, denominator = _EMITTERS[output](zeros, poles, gain)
    trace("numerator", numerator)
    trace("denominator", denominator)

    return numerator.to(dtype), denominator.to(dtype)


def _no_trace(stage: str, value: Tensor) -> None:
    pass

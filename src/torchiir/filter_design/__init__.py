"""Digital IIR filter design from analog prototypes."""

from ._analog_prototype import analog_prototype
from ._bessel_prototype import bessel_prototype
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._conjugate_pair_sort import conjugate_pair_cleanup, conjugate_pair_sort
from ._constants import (
    BAND_TYPES,
    CONJUGATE_PAIR_TOLERANCE,
    FILTER_TYPES,
    OUTPUT_FORMATS,
)
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import (
    ConjugatePairWarning,
    FilterDesignError,
    InvalidCutoffError,
    InvalidFilterTypeError,
    InvalidOrderError,
    InvalidToleranceError,
    SpecificationError,
)
from ._frequency_prewarp import frequency_prewarp
from ._iir_design import iir_design
from ._iir_is_stable import iir_is_stable
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._polynomial_from_roots import polynomial_from_roots
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos

__all__ = [
    # Design functions
    "analog_prototype",
    "bessel_prototype",
    "butterworth_prototype",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_prototype",
    "elliptic_prototype",
    "iir_design",
    # Transforms
    "bilinear_transform_zpk",
    "frequency_prewarp",
    "lowpass_to_bandpass_zpk",
    "lowpass_to_bandstop_zpk",
    "lowpass_to_highpass_zpk",
    # Conversions
    "polynomial_from_roots",
    "zpk_to_ba",
    "zpk_to_sos",
    # Utilities
    "conjugate_pair_cleanup",
    "conjugate_pair_sort",
    "iir_is_stable",
    # Constants
    "BAND_TYPES",
    "CONJUGATE_PAIR_TOLERANCE",
    "FILTER_TYPES",
    "OUTPUT_FORMATS",
    # Exceptions
    "ConjugatePairWarning",
    "FilterDesignError",
    "InvalidCutoffError",
    "InvalidFilterTypeError",
    "InvalidOrderError",
    "InvalidToleranceError",
    "SpecificationError",
]

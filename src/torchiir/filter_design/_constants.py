"""Constants for IIR filter design."""

# Default tolerance for grouping roots into complex conjugate pairs.
CONJUGATE_PAIR_TOLERANCE = 1e-6

FILTER_TYPES = (
    "butterworth",
    "chebyshev_type_1",
    "chebyshev_type_2",
    "elliptic",
    "bessel",
)

BAND_TYPES = ("lowpass", "highpass", "bandpass", "bandstop")

OUTPUT_FORMATS = ("ba", "sos")

"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class InvalidOrderError(FilterDesignError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not a positive integer
    - The number of zeros is incompatible with the number of poles
    """

    pass


class InvalidCutoffError(FilterDesignError):
    """Raised when cutoff or center frequency is invalid.

    This occurs when:
    - Cutoff is outside the open interval (0, 0.5)
    - Center frequency is outside the closed interval [0, 0.5]
    - Cutoff and center frequency produce a degenerate pre-warping factor
    """

    pass


class SpecificationError(FilterDesignError):
    """Raised when ripple or attenuation specifications are invalid.

    This occurs when:
    - Passband ripple is not strictly positive
    - Stopband attenuation is not strictly positive
    """

    pass


class InvalidFilterTypeError(FilterDesignError):
    """Raised when a filter type, band type or output format is unknown."""

    pass


class InvalidToleranceError(FilterDesignError):
    """Raised when a conjugate pairing tolerance is negative."""

    pass


class ConjugatePairWarning(UserWarning):
    """Warning for complex values that cannot be matched with a conjugate.

    The unmatched value is still treated as real; its imaginary part is
    discarded when coefficients are formed.
    """

    pass

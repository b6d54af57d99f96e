"""Frequency response evaluation for designed IIR filters."""

from ._frequency_response import frequency_response
from ._frequency_response_sos import frequency_response_sos

__all__ = [
    "frequency_response",
    "frequency_response_sos",
]

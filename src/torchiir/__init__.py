"""torchiir: digital IIR filter design for PyTorch."""

from . import (
    filter_analysis,
    filter_design,
)

__all__ = [
    "filter_analysis",
    "filter_design",
]

__version__ = "0.1.0"

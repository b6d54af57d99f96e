"""Dispatch to analog lowpass prototypes for digital IIR design."""

import math
from typing import Callable, Dict, Literal, Optional, Tuple

import torch
from torch import Tensor

from ._bessel_prototype import bessel_prototype
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import InvalidFilterTypeError

_Prototype = Tuple[Tensor, Tensor, Tensor, float]


def _butterworth(order, passband_ripple_db, stopband_attenuation_db, **kwargs):
    zeros, poles, gain = butterworth_prototype(order, **kwargs)
    return zeros, poles, gain, 1.0


def _chebyshev_type_1(
    order, passband_ripple_db, stopband_attenuation_db, **kwargs
):
    zeros, poles, gain = chebyshev_type_1_prototype(
        order, passband_ripple_db, **kwargs
    )
    return zeros, poles, gain, _even_order_ripple_gain(
        order, passband_ripple_db
    )


def _chebyshev_type_2(
    order, passband_ripple_db, stopband_attenuation_db, **kwargs
):
    zeros, poles, gain = chebyshev_type_2_prototype(
        order, stopband_attenuation_db, **kwargs
    )
    return zeros, poles, gain, 1.0


def _elliptic(order, passband_ripple_db, stopband_attenuation_db, **kwargs):
    zeros, poles, gain = elliptic_prototype(
        order, passband_ripple_db, stopband_attenuation_db, **kwargs
    )
    return zeros, poles, gain, _even_order_ripple_gain(
        order, passband_ripple_db
    )


def _bessel(order, passband_ripple_db, stopband_attenuation_db, **kwargs):
    zeros, poles, gain = bessel_prototype(order, **kwargs)
    return zeros, poles, gain, 1.0


def _even_order_ripple_gain(order: int, passband_ripple_db: float) -> float:
    """DC gain of an equiripple passband: 1/sqrt(1 + eps^2) for even order."""
    if order % 2 == 1:
        return 1.0

    eps_sq = 10 ** (passband_ripple_db / 10) - 1
    return 1.0 / math.sqrt(1 + eps_sq)


_PROTOTYPES: Dict[str, Callable[..., _Prototype]] = {
    "butterworth": _butterworth,
    "chebyshev_type_1": _chebyshev_type_1,
    "chebyshev_type_2": _chebyshev_type_2,
    "elliptic": _elliptic,
    "bessel": _bessel,
}


def analog_prototype(
    filter_type: Literal[
        "butterworth",
        "chebyshev_type_1",
        "chebyshev_type_2",
        "elliptic",
        "bessel",
    ],
    order: int,
    passband_ripple_db: float = 1.0,
    stopband_attenuation_db: float = 40.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> _Prototype:
    """
    Generate the analog lowpass prototype of a filter family.

    Parameters
    ----------
    filter_type : {"butterworth", "chebyshev_type_1", "chebyshev_type_2", "elliptic", "bessel"}
        Filter family.
    order : int
        Filter order. Must be positive.
    passband_ripple_db : float
        Passband ripple in dB (Chebyshev Type I and elliptic).
    stopband_attenuation_db : float
        Stopband attenuation in dB (Chebyshev Type II and elliptic).
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Analog zeros. Empty for Butterworth, Chebyshev Type I and Bessel;
        ``2 * (order // 2)`` zeros for Chebyshev Type II and elliptic.
    poles : Tensor
        Analog poles, shape (order,).
    gain : Tensor
        Analog system gain.
    nominal_gain : float
        Gain the digital filter should have at its passband reference
        frequency: 1, or :math:`1/\\sqrt{1 + \\epsilon^2}` for even order
        Chebyshev Type I and elliptic filters, whose DC response sits at
        the bottom of the passband ripple.

    Raises
    ------
    InvalidFilterTypeError
        If ``filter_type`` is unknown.
    """
    try:
        prototype = _PROTOTYPES[filter_type]
    except KeyError:
        raise InvalidFilterTypeError(
            f"Invalid filter_type: {filter_type}"
        ) from None

    return prototype(
        order,
        passband_ripple_db,
        stopband_attenuation_db,
        dtype=dtype,
        device=device,
    )

from typing import Optional, Tuple

import torch


def resolve_dtypes(
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> Tuple[torch.dtype, torch.dtype, torch.device]:
    """Return (real dtype, matching complex dtype, device) with defaults."""
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    if dtype == torch.float32:
        complex_dtype = torch.complex64
    elif dtype == torch.float64:
        complex_dtype = torch.complex128
    else:
        raise ValueError(f"Unsupported dtype: {dtype}")

    return dtype, complex_dtype, device

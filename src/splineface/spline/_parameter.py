"""Curve parameter conversion and out-of-domain handling."""

from typing import Optional, Union

import torch
from torch import Tensor

from ._extrapolation_error import ExtrapolationError

EXTRAPOLATE_MODES = ("error", "clamp", "extrapolate")


def check_extrapolate(extrapolate: str) -> str:
    if extrapolate not in EXTRAPOLATE_MODES:
        raise ValueError(
            f"extrapolate must be one of {EXTRAPOLATE_MODES}, "
            f"got {extrapolate!r}"
        )
    return extrapolate


def as_parameter(
    u: Union[float, Tensor],
    like: Optional[Tensor] = None,
) -> Tensor:
    """Convert ``u`` to a floating point tensor.

    If ``like`` is given, ``u`` takes its dtype and device. Integer
    tensors are promoted to the default floating dtype.
    """
    if like is not None:
        dtype = like.dtype
        if not dtype.is_floating_point:
            dtype = torch.get_default_dtype()
        return torch.as_tensor(u, dtype=dtype, device=like.device)

    u = torch.as_tensor(u)
    if not u.dtype.is_floating_point:
        u = u.to(torch.get_default_dtype())
    return u


def unit_interval(u: Tensor, extrapolate: str) -> Tensor:
    """Apply the extrapolation policy for the Bezier domain [0, 1]."""
    if extrapolate == "error":
        if torch.any(u < 0) or torch.any(u > 1):
            raise ExtrapolationError(
                "Parameter values outside [0, 1]. "
                "Use extrapolate='clamp' or 'extrapolate'."
            )
    elif extrapolate == "clamp":
        u = torch.clamp(u, 0.0, 1.0)
    # "extrapolate" mode: no clamping, allow extrapolation

    return u

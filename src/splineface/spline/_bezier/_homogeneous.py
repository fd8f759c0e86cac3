import warnings

import torch
from torch import Tensor


def homogeneous_to_cartesian(points: Tensor) -> Tensor:
    """Project homogeneous points (x, y, z, w) to (x/w, y/w, z/w).

    Parameters
    ----------
    points : Tensor
        Homogeneous points, shape (..., 4).

    Returns
    -------
    Tensor
        Cartesian points, shape (..., 3).

    Raises
    ------
    ValueError
        If points does not have last dimension 4.

    Warns
    -----
    RuntimeWarning
        If any weight is zero. Such points project to inf or nan.
    """
    points = torch.as_tensor(points)
    if points.shape[-1:] != (4,):
        raise ValueError(
            "homogeneous_to_cartesian: points must have last dimension 4, "
            f"got shape {tuple(points.shape)}"
        )

    w = points[..., 3:]
    if torch.any(w == 0):
        warnings.warn(
            "Homogeneous points with zero weight project to infinity.",
            RuntimeWarning,
            stacklevel=2,
        )

    return points[..., :3] / w

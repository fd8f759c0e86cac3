"""Bernstein polynomial representation and convenience function."""

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._degree_error import DegreeError
from .._parameter import check_extrapolate
from ._bernstein_evaluate import bernstein_evaluate
from ._factorial import factorial


@tensorclass
class BernsteinBasis:
    """Bernstein basis polynomial B_{i,n}(u) = C(n, i) u^i (1 - u)^(n - i).

    The binomial coefficient C(n, i) = n! / (i! (n - i)!) is computed once
    when the basis is created and reused by every evaluation.

    Attributes
    ----------
    i : int
        Basis index, 0 <= i <= n
    n : int
        Polynomial degree
    coefficient : Tensor
        Binomial coefficient C(n, i), 0-d float64
    extrapolate : str
        How to handle out-of-domain queries: "error", "clamp", "extrapolate"
    """

    i: int
    n: int
    coefficient: Tensor
    extrapolate: str


def bernstein(
    i: int,
    n: int,
    u: Optional[Union[float, Tensor]] = None,
    extrapolate: str = "error",
) -> Union[Callable[[Tensor], Tensor], Tensor]:
    """Create or evaluate the Bernstein polynomial B_{i,n}.

    Parameters
    ----------
    i : int
        Basis index, 0 <= i <= n.
    n : int
        Degree, n >= 0.
    u : float or Tensor, optional
        Parameter values in [0, 1]. If given, the polynomial is evaluated
        directly; otherwise a callable is returned.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"error"``: Raise ExtrapolationError for u outside [0, 1] (default).
        - ``"clamp"``: Clamp u to [0, 1].
        - ``"extrapolate"``: Evaluate the polynomial outside [0, 1].

    Returns
    -------
    Callable[[Tensor], Tensor] or Tensor
        ``u -> B_{i,n}(u)`` when u is None, else the values B_{i,n}(u).

    Raises
    ------
    DegreeError
        If n < 0 or i is outside [0, n].

    Examples
    --------
    >>> b = bernstein(1, 2)
    >>> b(torch.tensor([0.0, 0.5, 1.0]))
    tensor([0.0000, 0.5000, 0.0000])
    >>> bernstein(0, 1, 0.0)
    tensor(1.)
    """
    if n < 0:
        raise DegreeError(f"Degree must be non-negative, got {n}")
    if i < 0 or i > n:
        raise DegreeError(f"Basis index {i} out of range [0, {n}]")

    coefficient = factorial(n) // (factorial(i) * factorial(n - i))

    basis = BernsteinBasis(
        i=i,
        n=n,
        coefficient=torch.tensor(float(coefficient), dtype=torch.float64),
        extrapolate=check_extrapolate(extrapolate),
        batch_size=[],
    )

    if u is not None:
        return bernstein_evaluate(basis, u)

    return lambda u: bernstein_evaluate(basis, u)

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from .._degree_error import DegreeError
from .._parameter import as_parameter
from ._knots import as_knots


def _check_index(n_knots: int, degree: int, i: int) -> None:
    # N_{i,p} reads knots[i] through knots[i + p + 1]
    if i < 0 or i + degree + 1 >= n_knots:
        raise IndexError(
            f"Basis index {i} out of range [0, {n_knots - degree - 2}] "
            f"for degree {degree} and {n_knots} knots"
        )


def _term(numerator: Tensor, denominator: Tensor, lower: Tensor) -> Tensor:
    # A zero-width knot interval gives 0/0. The divide runs on a nonzero
    # stand-in so that backward never sees 1/0.
    vanishing = denominator == 0
    safe = torch.where(vanishing, torch.ones_like(denominator), denominator)

    term = numerator / safe * lower
    term = torch.where(vanishing, torch.zeros_like(term), term)

    return torch.where(torch.isnan(term), torch.zeros_like(term), term)


def b_spline_basis_evaluate(
    knots: Tensor,
    degree: int,
    i: int,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate the i-th B-spline basis function using Cox-de Boor recursion.

    Parameters
    ----------
    knots : Tensor
        Knot vector, shape (n_knots,). Must be non-decreasing.
    degree : int
        Polynomial degree p (0=constant, 1=linear, 2=quadratic, 3=cubic)
    i : int
        Basis function index, 0 <= i <= n_knots - p - 2
    u : float or Tensor
        Parameter values, shape (*query_shape)

    Returns
    -------
    basis : Tensor
        N_{i,p}(u), shape (*query_shape)

    Raises
    ------
    DegreeError
        If degree is negative.
    IndexError
        If i is negative or i + degree + 1 is not a valid knot index.
    KnotError
        If the knot vector is not 1-D or is empty.

    Notes
    -----
    For degree 0:
        N_{i,0}(u) = 1 if k_i <= u < k_{i+1}, else 0

    For degree p > 0:
        N_{i,p}(u) = ((u - k_i) / (k_{i+p} - k_i)) * N_{i,p-1}(u)
                   + ((k_{i+p+1} - u) / (k_{i+p+1} - k_{i+1})) * N_{i+1,p-1}(u)

    Repeated knots make a denominator zero. Each of the two terms is then
    0/0 and is replaced by 0 before the terms are summed. The replacement
    also holds for the gradient, which stays finite on clamped knot
    vectors.

    The spans are half-open, so every basis function is 0 at the last
    knot.

    Intermediate N_{j,q} are memoised for the duration of the call, which
    visits each (j, q) once instead of 2^p times.

    Examples
    --------
    >>> knots = torch.tensor([0., 0., 0., 1., 1., 1.], dtype=torch.float64)
    >>> b_spline_basis_evaluate(knots, 2, 1, 0.5)
    tensor(0.5000, dtype=torch.float64)
    """
    if degree < 0:
        raise DegreeError(f"Degree must be non-negative, got {degree}")

    knots = as_knots(knots)
    _check_index(knots.shape[0], degree, i)

    u = as_parameter(u, like=knots)

    cache = {}

    def basis(j: int, p: int) -> Tensor:
        if (j, p) in cache:
            return cache[(j, p)]

        if p == 0:
            value = ((knots[j] <= u) & (u < knots[j + 1])).to(knots.dtype)
        else:
            a = _term(
                u - knots[j], knots[j + p] - knots[j], basis(j, p - 1)
            )
            b = _term(
                knots[j + p + 1] - u,
                knots[j + p + 1] - knots[j + 1],
                basis(j + 1, p - 1),
            )

            value = a + b

        cache[(j, p)] = value
        return value

    return basis(i, degree)


def b_spline_basis(
    knots: Tensor,
    degree: int,
    i: Optional[int] = None,
    u: Optional[Union[float, Tensor]] = None,
) -> Union[Tensor, Callable[..., Tensor]]:
    """Evaluate or partially apply a B-spline basis function.

    Parameters
    ----------
    knots : Tensor
        Knot vector, shape (n_knots,). Must be non-decreasing.
    degree : int
        Polynomial degree p.
    i : int, optional
        Basis function index.
    u : float or Tensor, optional
        Parameter values. Requires ``i``.

    Returns
    -------
    Tensor or Callable
        - ``i`` and ``u`` given: the values N_{i,p}(u).
        - only ``i`` given: a callable ``u -> N_{i,p}(u)``.
        - neither given: a callable ``(i, u) -> N_{i,p}(u)``.

    Raises
    ------
    TypeError
        If ``u`` is given without ``i``.
    DegreeError
        If degree is negative.
    IndexError
        If ``i`` is out of range for the knot vector.

    Examples
    --------
    >>> knots = torch.tensor([0., 0., 0., 1., 1., 1.], dtype=torch.float64)
    >>> n = b_spline_basis(knots, 2)
    >>> n(0, 0.0)
    tensor(1., dtype=torch.float64)
    >>> n1 = b_spline_basis(knots, 2, 1)
    >>> n1(torch.tensor([0.25, 0.5], dtype=torch.float64))
    tensor([0.3750, 0.5000], dtype=torch.float64)
    """
    if u is not None and i is None:
        raise TypeError("b_spline_basis: u requires a basis index i")
    if degree < 0:
        raise DegreeError(f"Degree must be non-negative, got {degree}")

    # Partial forms keep their own copy of the knots
    knots = as_knots(knots).clone()

    if i is None:
        return lambda i, u: b_spline_basis_evaluate(knots, degree, i, u)

    _check_index(knots.shape[0], degree, i)

    if u is None:
        return lambda u: b_spline_basis_evaluate(knots, degree, i, u)

    return b_spline_basis_evaluate(knots, degree, i, u)

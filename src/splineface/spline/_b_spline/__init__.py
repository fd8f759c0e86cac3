from ._b_spline_basis import b_spline_basis, b_spline_basis_evaluate
from ._knot_span import knot_span

__all__ = [
    "b_spline_basis",
    "b_spline_basis_evaluate",
    "knot_span",
]

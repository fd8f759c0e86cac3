from ._bernstein import BernsteinBasis, bernstein
from ._bernstein_evaluate import bernstein_evaluate
from ._factorial import factorial

__all__ = [
    "BernsteinBasis",
    "bernstein",
    "bernstein_evaluate",
    "factorial",
]

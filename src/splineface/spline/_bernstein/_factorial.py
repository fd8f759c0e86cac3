import math


def factorial(n: int) -> int:
    """Factorial of a non-negative integer, with ``factorial(0) == 1``.

    Python integers do not overflow, so the result is exact for any ``n``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial: n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"factorial: n must be non-negative, got {n}")
    return math.factorial(n)

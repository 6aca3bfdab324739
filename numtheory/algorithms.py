def truncated_remainder(a: int, b: int) -> int:
    """Remainder of a / b with the quotient rounded toward zero, takes the sign of `a`."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor using the Euclidean algorithm.

    The first reduction always runs, so `b == 0` raises ZeroDivisionError.
    Remainders truncate (sign of the dividend), and the sign of the result
    is not normalized: it follows the dividend chain.

    >>> gcd(10, 15)
    5
    >>> gcd(56, -42)
    14
    >>> gcd(-7, 3)
    -1
    """
    a, b = b, truncated_remainder(a, b)
    while b != 0:
        a, b = b, truncated_remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """
    Least common multiple, (a * b) / gcd(a, b).
    Raises ZeroDivisionError if b == 0.

    >>> lcm(56, 42)
    168
    >>> lcm(56, -42)
    -168
    """
    # exact division, gcd divides a
    return (a * b) // gcd(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.
    Returns (g, x, y) such that a * x + b * y == g.
    Never divides by zero: extended_gcd(a, 0) == (a, 1, 0).

    >>> extended_gcd(10, 15)
    (5, -1, 1)
    """
    x, y, u, v = 0, 1, 1, 0
    while b != 0:
        q, b, a = *divmod(a, b), b
        x, u = u - q * x, x
        y, v = v - q * y, y
    return a, u, v

"""
Arithmetic in the prime field F_p = {0, 1, ..., p - 1}.

Every operand has to be a member of the field already. Out of range values are
rejected with InvalidArgument instead of being reduced, so a caller that feeds
in an unreduced coordinate finds out straight away.
"""

from eccore.error import InvalidArgument, InvalidResult

__all__ = ['add', 'subtract', 'multiply', 'divide', 'additive_inverse', 'multiplicative_inverse',
           'check_is_less_than', 'check_params']


def check_is_less_than(a: int, b: int) -> bool:
    return a < b


def check_params(*operands: int, p: int):
    """Raise InvalidArgument unless every operand is an integer in [0, p)"""
    for operand in operands:
        if not isinstance(operand, int) or isinstance(operand, bool):
            raise InvalidArgument(f"{operand!r} is not an integer")
        if operand < 0 or not check_is_less_than(operand, p):
            raise InvalidArgument(f"{operand} is not an element of the field of order {p}")


def _canonical(result: int, p: int) -> int:
    if not 0 <= result < p:
        raise InvalidResult(f"{result} is not reduced modulo {p}")
    return result


def add(a: int, b: int, p: int) -> int:
    """a + b mod p"""
    check_params(a, b, p=p)
    return _canonical((a + b) % p, p)


def multiply(a: int, b: int, p: int) -> int:
    """a * b mod p"""
    check_params(a, b, p=p)
    return _canonical((a * b) % p, p)


def additive_inverse(a: int, p: int) -> int:
    """-a such that a + (-a) = 0 mod p"""
    check_params(a, p=p)
    if a == 0:
        return 0
    return _canonical(p - a, p)


def subtract(a: int, b: int, p: int) -> int:
    """a - b = a + (-b) mod p"""
    check_params(a, b, p=p)
    return add(a, additive_inverse(b, p), p)


def multiplicative_inverse(a: int, p: int) -> int:
    """
    a^-1 such that a * a^-1 = 1 mod p, for a prime p.

    By Fermat's Little Theorem a^(p-1) = 1 mod p, hence a^(p-2) is the inverse of a.
    Zero has no inverse and raises InvalidArgument. A composite p makes the
    identity above fail, which is reported as InvalidResult.
    """
    check_params(a, p=p)
    if a == 0:
        raise InvalidArgument(f"0 has no multiplicative inverse modulo {p}")

    inverse = _canonical(pow(a, p - 2, p), p)
    if (a * inverse) % p != 1:
        raise InvalidResult(f"{inverse} is not the inverse of {a}, is {p} prime?")
    return inverse


def divide(a: int, b: int, p: int) -> int:
    """a / b = a * b^-1 mod p"""
    check_params(a, b, p=p)
    return multiply(a, multiplicative_inverse(b, p), p)

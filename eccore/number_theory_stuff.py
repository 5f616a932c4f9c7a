import random

__all__ = ['miller_rabin']


def miller_rabin(n, runs=40):
    # Probabilistic, the chance of a composite passing is at most 4^-runs
    # https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test

    if n < 2:
        return False
    if n in (2, 3):
        return True

    # If number is even, it's a composite number
    if not n & 1:
        return False

    r, s = 0, n - 1
    while s % 2 == 0:
        r += 1
        s //= 2
    for _ in range(runs):
        a = random.randrange(2, n - 1)
        x = pow(a, s, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True

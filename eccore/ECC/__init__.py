"""
Group operations on a short Weierstrass curve y^2 = x^3 + ax + b over F_p.

    R = P + Q       point addition
    R = P + P       point doubling
    R = d * P       scalar multiplication

Points are values that do not know which curve they belong to, every operation
takes them through an EllipticCurve which validates them before doing any work.
"""

from eccore import finite_fields as ff
from eccore.config import strict_curves, miller_rabin_runs
from eccore.error import InvalidPoint, InvalidScalar, InvalidCurve
from eccore.number_theory_stuff import miller_rabin

__all__ = ['CurvePoint', 'Coordinate', 'Identity', 'EllipticCurve']


class CurvePoint:
    """Either an affine Coordinate(x, y) or the Identity (the point at infinity)"""

    __slots__ = ()

    def is_identity(self) -> bool:
        raise NotImplementedError


class Coordinate(CurvePoint):

    __slots__ = ('_x', '_y')

    def __init__(self, x: int, y: int):
        object.__setattr__(self, '_x', x)
        object.__setattr__(self, '_y', y)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def is_identity(self):
        return False

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((Coordinate, self._x, self._y))

    def __reduce__(self):
        return Coordinate, (self._x, self._y)

    def __repr__(self):
        return f"Coordinate({self._x}, {self._y})"


class _Identity(CurvePoint):

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_identity(self):
        return True

    def __reduce__(self):
        return _Identity, ()

    def __repr__(self):
        return "Identity"


Identity = _Identity()

CurvePoint.Coordinate = Coordinate
CurvePoint.Identity = Identity


def _unpack(point):
    """Dispatch on the two point kinds, anything else is a caller bug"""
    if point is Identity:
        return None
    if isinstance(point, Coordinate):
        return point.x, point.y
    raise TypeError(f"Expected a CurvePoint, got {point!r}")


class EllipticCurve:
    """y^2 = x^3 + ax + b mod p, with p > 3 prime and 4a^3 + 27b^2 != 0 mod p"""

    __slots__ = ('_a', '_b', '_p', '_name')

    def __init__(self, a: int, b: int, p: int, name: str = None):
        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_b', b)
        object.__setattr__(self, '_p', p)
        object.__setattr__(self, '_name', name)
        if strict_curves():
            self.check()

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def p(self) -> int:
        return self._p

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self._a, self._b, self._p) == (other._a, other._b, other._p)

    def __hash__(self):
        return hash((EllipticCurve, self._a, self._b, self._p))

    def __repr__(self):
        name = f", name={self._name!r}" if self._name else ''
        return f"EllipticCurve(a={self._a}, b={self._b}, p={self._p}{name})"

    def f(self, x: int) -> int:
        """Compute x^3 + ax + b in field F_p"""
        p = self._p
        x3 = ff.multiply(ff.multiply(x, x, p), x, p)
        ax = ff.multiply(self._a, x, p)
        return ff.add(ff.add(x3, ax, p), self._b, p)

    def discriminant(self) -> int:
        """4a^3 + 27b^2 mod p, zero for a singular curve"""
        p, a, b = self._p, self._a, self._b
        a3 = ff.multiply(ff.multiply(a, a, p), a, p)
        b2 = ff.multiply(b, b, p)
        return ff.add(ff.multiply(4 % p, a3, p), ff.multiply(27 % p, b2, p), p)

    def check(self):
        """Raise InvalidCurve if the parameters break the curve contract"""
        a, b, p = self._a, self._b, self._p
        if not all(isinstance(n, int) and not isinstance(n, bool) for n in (a, b, p)):
            raise InvalidCurve(self, 'Curve parameters must be integers')
        if p <= 3:
            raise InvalidCurve(self, f"Modulus {p} must be greater than 3")
        if not miller_rabin(p, runs=miller_rabin_runs()):
            raise InvalidCurve(self, f"Modulus {p} is not prime")
        if not (0 <= a < p and 0 <= b < p):
            raise InvalidCurve(self, f"Coefficients must be elements of the field of order {p}")
        if self.discriminant() == 0:
            raise InvalidCurve(self, 'Curve is singular, 4a^3 + 27b^2 = 0 mod p')

    def is_valid(self) -> bool:
        try:
            self.check()
        except InvalidCurve:
            return False
        return True

    def is_on_curve(self, point: CurvePoint) -> bool:
        coords = _unpack(point)
        if coords is None:
            return True
        x, y = coords
        p = self._p
        if not all(isinstance(n, int) and 0 <= n < p for n in (x, y)):
            return False
        return ff.multiply(y, y, p) == self.f(x)

    def __contains__(self, point: CurvePoint) -> bool:
        return self.is_on_curve(point)

    def _validate(self, *points):
        for point in points:
            if not self.is_on_curve(point):
                raise InvalidPoint(point)

    def _third_point(self, s, x1, y1, x2) -> Coordinate:
        """Reflection of the third intersection of the line with slope s through (x1, y1)"""
        p = self._p
        x3 = ff.subtract(ff.subtract(ff.multiply(s, s, p), x1, p), x2, p)
        y3 = ff.subtract(ff.multiply(s, ff.subtract(x1, x3, p), p), y1, p)
        return Coordinate(x3, y3)

    def add(self, A: CurvePoint, B: CurvePoint) -> CurvePoint:
        """
        C = A + B, the x-reflection of the third point where the chord through A and B
        meets the curve. https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Point_addition
        """
        self._validate(A, B)

        # no unique chord through a single point, use the tangent
        if A == B:
            return self.double(A)

        if A is Identity:
            return B
        if B is Identity:
            return A

        p = self._p
        x1, y1 = A
        x2, y2 = B

        # vertical chord, B = -A
        if x1 == x2 and ff.add(y1, y2, p) == 0:
            return Identity

        s = ff.divide(ff.subtract(y2, y1, p), ff.subtract(x2, x1, p), p)
        return self._third_point(s, x1, y1, x2)

    def double(self, A: CurvePoint) -> CurvePoint:
        """2A = A + A using the tangent at A"""
        self._validate(A)

        if A is Identity:
            return Identity

        p = self._p
        x1, y1 = A

        # vertical tangent
        if y1 == 0:
            return Identity

        xx = ff.multiply(x1, x1, p)
        numerator = ff.add(ff.add(ff.add(xx, xx, p), xx, p), self._a, p)
        s = ff.divide(numerator, ff.add(y1, y1, p), p)
        return self._third_point(s, x1, y1, x1)

    def scalar_mul(self, A: CurvePoint, d: int) -> CurvePoint:
        """
        d * A by double-and-add, most significant bit first.
        https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Double-and-add
        """
        if not isinstance(d, int) or isinstance(d, bool) or d <= 0:
            raise InvalidScalar(d)
        self._validate(A)

        R = A
        for i in range(d.bit_length() - 2, -1, -1):
            R = self.double(R)
            if (d >> i) & 1:
                R = self.add(R, A)
        return R

    def negate(self, A: CurvePoint) -> CurvePoint:
        """-A, the reflection of A about the x-axis"""
        self._validate(A)
        if A is Identity:
            return Identity
        x, y = A
        return Coordinate(x, ff.additive_inverse(y, self._p))

    def subtract(self, A: CurvePoint, B: CurvePoint) -> CurvePoint:
        """A - B = A + (-B)"""
        self._validate(A, B)
        return self.add(A, self.negate(B))

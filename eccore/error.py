__all__ = ['FiniteFieldError', 'InvalidArgument', 'InvalidResult',
           'EllipticCurveError', 'InvalidPoint', 'InvalidScalar', 'InvalidCurve']


class FiniteFieldError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidArgument(FiniteFieldError):
    pass


class InvalidResult(FiniteFieldError):
    pass


class EllipticCurveError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidPoint(EllipticCurveError):
    def __init__(self, point, message=None):
        super().__init__(message or f"{point!r} is not on the curve")
        self.point = point


class InvalidScalar(EllipticCurveError):
    def __init__(self, scalar, message=None):
        super().__init__(message or f"Scalar must be a positive integer, got {scalar!r}")
        self.scalar = scalar


class InvalidCurve(EllipticCurveError):
    def __init__(self, curve, message):
        super().__init__(message)
        self.curve = curve

import os

__all__ = ['strict_curves', 'miller_rabin_runs']

_TRUE = ('1', 'true', 'yes', 'on')


def strict_curves():
    """Check curve parameters whenever an EllipticCurve is constructed"""
    return os.environ.get('ECCORE_STRICT_CURVES', '0').strip().lower() in _TRUE


def miller_rabin_runs():
    runs = int(os.environ.get('ECCORE_MILLER_RABIN_RUNS', 40))
    assert runs > 0, 'ECCORE_MILLER_RABIN_RUNS must be positive'
    return runs

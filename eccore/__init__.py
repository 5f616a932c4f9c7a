"""
Zero dependency implementation of prime field and short Weierstrass elliptic curve arithmetic.
"""

from . import finite_fields, number_theory_stuff, config, error, ECC
from .ECC import *
from .error import *
from .number_theory_stuff import *

__all__ = []

for _module in (ECC, error, number_theory_stuff):
    __all__.extend(getattr(_module, '__all__', []))

__all__.extend(['finite_fields', 'config'])

__version__ = "0.1"

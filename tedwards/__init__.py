# Twisted Edwards curve arithmetic in extended coordinates, in plain Python.

# Not constant time, not zeroing buffers after use, so this is meant for
# reference computations, test vectors and tooling rather than for handling
# secrets in production.

# Public symbols are imported here. Curve instances live in their own modules
# (tedwards.ed25519, tedwards.bandersnatch).

__version__ = "0.1.0"

from .curve import Curve, recover_x
from .exceptions import CurveError
from .field import GF, FieldElement
from .point import Point
from .util import frombits, tobits

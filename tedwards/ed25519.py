from .curve import Curve, recover_x
from .field import GF
from .point import Point
from .util import clamp, sha, tobytes, tointsign

# Ed25519 (RFC 8032) on the twisted Edwards curve -x2 + y2 = 1 + d x2 y2

# Field prime
p = 2**255 - 19

# Group order of the prime subgroup generated by G
q = 2**252 + 27742317777372353535851937790883648493

fe = GF(p, "fe")
scalar = GF(q, "scalar")

a, d = -fe.one, -fe(121665) / fe(121666)

# Base point (prime group generator) has y = 4/5 and an even x
_y = fe(4) / fe(5)
G = Point.from_affine(recover_x(a, d, _y), _y)

# Neutral element
ZERO = Point.zero(fe)

curve = Curve(a, d, G, "ed25519")


def encode(P: Point) -> bytes:
  """Standard Ed25519 point encoding: y with the low bit of x as the high bit."""
  x, y = P.to_affine()
  return tobytes(y.val + (x.bit(0) << 255))

def decode(b) -> Point:
  """Read a standard Ed25519 point (e.g. a public key)"""
  val, sign = tointsign(b)
  if val >= p: raise ValueError("Non-canonical y coordinate")
  return curve.from_y(fe(val), sign)

def secret_scalar(edsk: bytes) -> int:
  """
  Converts Ed25519 secret key bytes to a clamped scalar.

  Note:
    Public key is encode(curve.mul(secret_scalar(edsk), G))
  """
  # Sodium concatenates the public key, making it 64 bytes
  if len(edsk) not in (32, 64): raise ValueError("Invalid length for edsk")
  return clamp(sha(edsk[:32]))

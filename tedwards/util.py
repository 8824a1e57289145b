import hashlib
from typing import List, Sequence, Tuple


def clamp(x: int) -> int:
  """Ed25519 standard clamping for scalars (from hashed secret key)"""
  # 256 bits 01[x]000  (using 251 bits of x, masking on/off others)
  return x & (1 << 255) - 8 | 1 << 254


def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != 32: raise ValueError("Should be exactly 32 bytes")
  return int.from_bytes(x, "little")

def tointsign(x) -> Tuple[int, bool]:
  """Separate the 255 bit integer and its high bit as a sign, return both."""
  val = toint(x)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")


def tobits(x: int, width: int = 0) -> List[int]:
  """Little-endian bits of a non-negative integer, zero padded to width."""
  if x < 0: raise ValueError(f"Cannot decompose negative {x} into bits")
  return [x >> i & 1 for i in range(max(width, x.bit_length()))]

def frombits(bits: Sequence[int]) -> int:
  """Inverse of tobits"""
  return sum(bool(b) << i for i, b in enumerate(bits))


def sha(s) -> int:
  """Return SHA-512 as 512 bit integer"""
  return int.from_bytes(shabytes(s), "little")

def shabytes(s) -> bytes:
  return hashlib.sha512(s).digest()

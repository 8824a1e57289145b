from __future__ import annotations

from functools import cached_property
from typing import Optional, Sequence, Union

from .exceptions import CurveError
from .field import FieldElement
from .point import Point
from .util import tobits

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Homogenized with x = X/Z, y = Y/Z: a X2 Z2 + Y2 Z2 = Z4 + d X2 Y2


def recover_x(a: FieldElement, d: FieldElement, y: FieldElement, negative=False) -> FieldElement:
  """Solve the curve equation for x, choosing the root whose low bit is negative."""
  num, den = y.one - y.sq, a - d * y.sq
  if den.is_zero: raise ValueError(f"No x coordinate for {y=}")
  x2 = num / den
  if not x2.is_square: raise ValueError(f"{y=} is not the y coordinate of any curve point")
  x = x2.sqrt
  if x.is_zero and negative: raise ValueError("x = 0 has no negative root")
  return x if x.bit(0) == negative else -x


class Curve:
  """
  A twisted Edwards curve with generator G, validated at construction.

  All group operations are pure functions of the curve and their arguments.
  They do not check that their inputs are on the curve; use contains() for that.
  """

  def __init__(self, a: FieldElement, d: FieldElement, G: Point, name: Optional[str] = None):
    if not isinstance(a, FieldElement) or not isinstance(d, FieldElement) or a.p != d.p:
      raise CurveError("Curve coefficients a and d must be elements of the same field")
    if a.is_zero: raise CurveError("Curve coefficient a must not be zero")
    if d.is_zero: raise CurveError("Curve coefficient d must not be zero")
    if a == d: raise CurveError("Curve coefficients a and d must differ")
    self.a = a
    self.d = d
    self.F = type(a)
    self.name = name
    if not isinstance(G, Point) or not self.contains(G):
      raise CurveError(f"Generator {G!r} is not on the curve")
    self.G = G

  def __repr__(self):
    return self.name or f"Curve({self.a!r}, {self.d!r}, {self.G!r})"

  @property
  def zero(self) -> Point:
    return Point.zero(self.F)

  @cached_property
  def is_complete(self) -> bool:
    """The addition law has no exceptional cases when a is a square and d is not."""
    return self.a.is_square and not self.d.is_square

  def from_y(self, y: FieldElement, negative=False) -> Point:
    """Restore from a y coordinate and a sign (low bit of x)"""
    return Point.from_affine(recover_x(self.a, self.d, y, negative), y)

  def contains(self, P: Point) -> bool:
    """Check that P is a well formed point on this curve. Never raises."""
    if not isinstance(P, Point) or any(not isinstance(c, FieldElement) or c.p != self.F.p for c in P):
      return False
    X, Y, T, Z = P
    if Z.is_zero or Z * T != X * Y:
      return False
    X2, Y2, Z2 = X.sq, Y.sq, Z.sq
    return Z2 * (self.a * X2 + Y2) == Z2.sq + self.d * X2 * Y2

  def __contains__(self, P) -> bool:
    return self.contains(P)

  def add(self, P1: Point, P2: Point) -> Point:
    """Unified addition (add-2008-hwcd), also valid for doubling and the neutral element."""
    X1, Y1, T1, Z1 = P1
    X2, Y2, T2, Z2 = P2
    A = X1 * X2
    B = Y1 * Y2
    C = self.d * T1 * T2
    D = Z1 * Z2
    E = (X1 + Y1) * (X2 + Y2) - A - B
    F = D - C
    G = D + C
    H = B - self.a * A
    return Point(E * F, G * H, E * H, F * G)

  def sub(self, P1: Point, P2: Point) -> Point:
    return self.add(P1, -P2)

  def double(self, P: Point) -> Point:
    """Dedicated doubling (dbl-2008-hwcd), T of the input is not needed."""
    X1, Y1, _, Z1 = P
    A = X1.sq
    B = Y1.sq
    C = Z1.sq.dbl
    D = self.a * A
    E = (X1 + Y1).sq - A - B
    G = D + B
    F = G - C
    H = D - B
    return Point(E * F, G * H, E * H, F * G)

  def bit_mul(self, bits: Sequence[int], P: Point) -> Point:
    """
    Multiply P by the integer whose little-endian bits are given.

    Left-to-right double-and-add that always runs len(bits) steps, so the
    width of the decomposition rather than the value sets the cost.
    """
    Q = self.zero
    for bit in reversed(bits):
      Q = self.double(Q)
      if bit: Q = self.add(Q, P)
    return Q

  def mul(self, n: Union[FieldElement, int], P: Point) -> Point:
    """Multiply P by a scalar field element (or a non-negative int)."""
    bits = tobits(n) if isinstance(n, int) else n.bits()
    return self.bit_mul(bits, P)

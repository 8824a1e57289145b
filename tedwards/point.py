from __future__ import annotations

from functools import cached_property
from typing import Optional, Tuple, Type

from .field import FieldElement

# Points are represented as tuples (X, Y, T, Z) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z


class Point:
  """
  A point in extended twisted Edwards coordinates.

  Points know nothing about the curve they are on; the group law lives in
  Curve. Coordinates are never modified after construction.
  """

  def __init__(self, x: FieldElement, y: FieldElement, t: Optional[FieldElement] = None, z: Optional[FieldElement] = None):
    if t is None and z is not None:
      # Scale by z so that T*Z == X*Y without dividing
      x, y, t, z = x * z, y * z, x * y, z.sq
    self.X = x
    self.Y = y
    self.Z = x.one if z is None else z
    self.T = x * y if t is None else t

  @staticmethod
  def from_affine(x: FieldElement, y: FieldElement) -> Point:
    return Point(x, y, x * y, x.one)

  @staticmethod
  def zero(F: Type[FieldElement]) -> Point:
    """The canonical neutral element (0, 1, 0, 1)"""
    return Point(F.zero, F.one, F.zero, F.one)

  @property
  def F(self) -> Type[FieldElement]:
    """The coordinate field"""
    return type(self.Z)

  @property
  def is_zero(self) -> bool:
    return self.X.is_zero and self.Y == self.Z

  def to_affine(self) -> Tuple[FieldElement, FieldElement]:
    """Return (x, y). Requires Z != 0, which holds for every point made by a Curve."""
    zinv = self.Z.inv
    return self.X * zinv, self.Y * zinv

  @cached_property
  def affine(self) -> Tuple[FieldElement, FieldElement]: return self.to_affine()

  @property
  def x(self) -> FieldElement: return self.affine[0]

  @property
  def y(self) -> FieldElement: return self.affine[1]

  def __iter__(self): return iter((self.X, self.Y, self.T, self.Z))
  def __repr__(self): return f"Point({self.X!r}, {self.Y!r}, {self.T!r}, {self.Z!r})"
  def __str__(self): return f"({self.x!r}, {self.y!r})"
  def __hash__(self): return hash(self.affine)

  def __neg__(self) -> Point:
    return Point(-self.X, self.Y, -self.T, self.Z)

  def __eq__(self, othr):
    if not isinstance(othr, Point): raise TypeError(f"Points cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      self.X * othr.Z == othr.X * self.Z and
      self.Y * othr.Z == othr.Y * self.Z
    )

from __future__ import annotations

from functools import cached_property, lru_cache
from typing import List, Optional, Type, Union


class FieldElement:
  """An element of the prime field GF(p). Use GF(p) to get the class for a modulus."""
  p: int
  zero: FieldElement
  one: FieldElement

  def __init__(self, x: int): self.val = x % self.p
  def __hash__(self): return hash((self.p, self.val))
  def __repr__(self): return f"{type(self).__name__}({self.val})"
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(self.size, 'little')
  def __int__(self): return self.val
  def bit(self, n: int): return bool(self.val & 1 << n)

  @classmethod
  def width(cls) -> int:
    """Number of bits in the decomposition of any element"""
    return cls.p.bit_length()

  @property
  def size(self) -> int: return (self.p.bit_length() + 7) // 8

  def bits(self) -> List[int]:
    """Fixed width bit decomposition, least significant bit first."""
    return [self.val >> i & 1 for i in range(self.width())]

  def _v(self, o: Union[FieldElement, int]) -> int:
    if isinstance(o, int): return o
    if not isinstance(o, FieldElement) or o.p != self.p:
      raise TypeError(f"Cannot combine {self!r} with {o!r}")
    return o.val

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, FieldElement) or other.p != self.p:
      raise TypeError(f"Cannot compare {self!r} with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return type(self)(-self.val)
  def __add__(self, o): return type(self)(self.val + self._v(o))
  def __sub__(self, o): return type(self)(self.val - self._v(o))
  def __mul__(self, o): return type(self)(self.val * self._v(o))
  def __radd__(self, o): return self + o
  def __rsub__(self, o): return -self + o
  def __rmul__(self, o): return self * o

  def __truediv__(self, o: FieldElement) -> FieldElement:
    """Division mod p"""
    return self if o == self.one else self * o.inv

  def __pow__(self, s: int) -> FieldElement:
    # Use faster cached .sq for x**2 because it is a very common operation
    if s == 2: return self.sq
    if s < 0: return self.inv**-s
    return type(self)(pow(self.val, s, self.p))

  @property
  def is_zero(self) -> bool: return self.val == 0

  @property
  def dbl(self) -> FieldElement:
    """Doubled"""
    return type(self)(self.val << 1)

  @cached_property
  def inv(self) -> FieldElement:
    if self.is_zero: raise ZeroDivisionError(f"{type(self).__name__}(0) has no inverse")
    return type(self)(pow(self.val, -1, self.p))

  @cached_property
  def is_negative(self) -> bool: return self.val > (self.p - 1) // 2

  # Legendre symbol: zero, one or minus one
  @cached_property
  def chi(self) -> FieldElement:
    """Legendre symbol"""
    return type(self)(pow(self.val, (self.p - 1) // 2, self.p))

  @cached_property
  def sq(self) -> FieldElement:
    """Squared"""
    x = self * self
    x.is_square = True
    return x

  @cached_property
  def is_square(self) -> bool: return self.is_zero or self.chi == self.one

  @cached_property
  def sqrt(self) -> FieldElement:
    """The non-negative square root. Raises ValueError if there is none."""
    if not self.is_square: raise ValueError('Not a square!')
    p = self.p
    if p % 4 == 3:
      root = self**((p + 1) // 4)
    elif p % 8 == 5:
      # Either x^((p+3)/8) or that times sqrt(-1)
      root = self**((p + 3) // 8)
      if root.sq != self: root *= type(self)(2)**((p - 1) // 4)
    else:
      root = self._tonelli_shanks()
    assert root.sq == self
    return abs(root)

  def _tonelli_shanks(self) -> FieldElement:
    F, p = type(self), self.p
    if self.is_zero: return self
    q, s = p - 1, 0
    while q % 2 == 0:
      q //= 2
      s += 1
    # Any quadratic non-residue will do
    z = F(2)
    while z.is_square: z += 1
    m, c, t, r = s, z**q, self**q, self**((q + 1) // 2)
    while t != self.one:
      i, t2 = 0, t
      while t2 != self.one:
        t2 = t2.sq
        i += 1
      b = c**(1 << (m - i - 1))
      m, c = i, b.sq
      t, r = t * c, r * b
    return r


@lru_cache(maxsize=None)
def GF(p: int, name: Optional[str] = None) -> Type[FieldElement]:
  """Return the element class of the prime field with modulus p."""
  if p < 3 or p % 2 == 0: raise ValueError(f"Field modulus must be an odd prime, not {p}")
  F = type(name or f"GF{p}", (FieldElement,), dict(p=p, __module__=__name__))
  F.zero, F.one = F(0), F(1)
  return F

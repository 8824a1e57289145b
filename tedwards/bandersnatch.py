from .curve import Curve
from .field import GF
from .point import Point

# Bandersnatch: -5 x2 + y2 = 1 + d x2 y2 over the BLS12-381 scalar field,
# a curve made for use inside zero-knowledge circuits.

p = 0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001

# Order of the prime subgroup generated by G (the full group has cofactor 4)
q = 0x1cfb69d4ca675f520cce760202687600ff8f87007419047174fd06b52876e7e1
cofactor = 4

fe = GF(p, "fe")
scalar = GF(q, "scalar")

a = fe(-5)
d = fe(0x6389c12633c267cbc66e3bf86be3b6d8cb66677177e54f92b369f2f5188d58e7)

G = Point.from_affine(
  fe(18886178867200960497001835917649091219057080094937609519140440539760939937304),
  fe(19188667384257783945677642223292697773471335439753913231509108946878080696678),
)

ZERO = Point.zero(fe)

curve = Curve(a, d, G, "bandersnatch")

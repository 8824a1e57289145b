from secrets import randbelow, token_bytes

import nacl.bindings as sodium
import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from tedwards import Point, tobits
from tedwards.ed25519 import G, ZERO, a, curve, d, decode, encode, fe, p, q, scalar, secret_scalar
from tedwards.util import tobytes


def test_constants():
  assert a == -fe.one
  assert d * fe(121666) == -fe(121665)
  assert G.x == fe(15112221349535400772501151409588531511454012693041857206046113283949847762202)
  assert G.y == fe(46316835694926478169428394003475163141307993866256225615783033603165251855960)
  assert encode(G).hex() == "58" + 31 * "66"
  assert curve.is_complete
  assert G in curve
  assert ZERO in curve
  assert repr(curve) == "ed25519"


def test_affine_roundtrip():
  x, y = G.to_affine()
  assert Point.from_affine(x, y).to_affine() == (x, y)
  P = curve.mul(scalar(randbelow(q)), G)
  x, y = P.to_affine()
  assert Point.from_affine(x, y) == P
  assert Point.from_affine(x, y) in curve


def test_group_order():
  # The order reduces to zero in the scalar field, so also use wider fields and raw bits
  assert curve.mul(fe(q), G).is_zero
  assert curve.mul(q, G).is_zero
  assert curve.bit_mul(tobits(q, 256), G).is_zero
  assert curve.mul(scalar(q), G).is_zero
  assert curve.mul(scalar(q - 1), G) == -G
  assert curve.mul(fe(q + 1), G) == G
  assert curve.mul(scalar(0), G) == ZERO


def test_group_laws():
  P = curve.mul(scalar(randbelow(q)), G)
  Q = curve.mul(scalar(randbelow(q)), G)
  R = curve.mul(scalar(randbelow(q)), G)
  assert curve.add(P, ZERO) == P
  assert curve.add(ZERO, P) == P
  assert curve.add(P, -P) == ZERO
  assert curve.add(P, Q) == curve.add(Q, P)
  assert curve.double(P) == curve.add(P, P)
  assert curve.add(curve.add(P, Q), R) == curve.add(P, curve.add(Q, R))
  for S in (curve.add(P, Q), curve.double(P), -P, curve.sub(P, Q)):
    assert S in curve
  for k in (0, 1, 2, 3, 17):
    S = ZERO
    for i in range(k):
      S = curve.add(S, P)
    assert curve.mul(scalar(k), P) == S


def test_scalar_distributes():
  m, n = scalar(randbelow(q)), scalar(randbelow(q))
  assert curve.mul(m + n, G) == curve.add(curve.mul(m, G), curve.mul(n, G))
  assert curve.mul(m * n, G) == curve.mul(m, curve.mul(n, G))


def test_mul_vs_sodium():
  for i in range(5):
    k = 1 + randbelow(q - 1)
    expected = sodium.crypto_scalarmult_ed25519_base_noclamp(tobytes(k))
    assert encode(curve.mul(scalar(k), G)).hex() == expected.hex()


def test_add_vs_sodium():
  P = curve.mul(scalar(1 + randbelow(q - 1)), G)
  Q = curve.mul(scalar(1 + randbelow(q - 1)), G)
  assert sodium.crypto_core_ed25519_is_valid_point(encode(P))
  expected = sodium.crypto_core_ed25519_add(encode(P), encode(Q))
  assert encode(curve.add(P, Q)).hex() == expected.hex()
  expected = sodium.crypto_core_ed25519_sub(encode(P), encode(Q))
  assert encode(curve.sub(P, Q)).hex() == expected.hex()


def test_pubkey_vs_cryptography():
  sk = Ed25519PrivateKey.generate()
  edsk = sk.private_bytes_raw()
  edpk = sk.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
  K = curve.mul(secret_scalar(edsk), G)
  assert encode(K).hex() == edpk.hex()
  assert decode(edpk) == K


def test_decode():
  P = curve.mul(scalar(randbelow(q)), G)
  assert decode(encode(P)) == P
  assert decode(encode(-P)) == -P
  assert decode(encode(ZERO)) == ZERO
  assert decode(bytes(encode(G))) == G

  # Non-canonical y = p + 1 (would be y = 1)
  with pytest.raises(ValueError):
    decode(tobytes(p + 1))
  # Negative zero x
  with pytest.raises(ValueError):
    decode(tobytes(1 + (1 << 255)))
  # About half of all y have no x on the curve
  bad = [y for y in range(2, 40) if not ((fe.one - fe(y).sq) / (a - d * fe(y).sq)).is_square]
  assert bad
  with pytest.raises(ValueError):
    decode(tobytes(bad[0]))
  with pytest.raises(ValueError):
    decode(b"short")


def test_secret_scalar():
  k = secret_scalar(token_bytes(32))
  assert k & 7 == 0
  assert k >> 254 == 1
  assert secret_scalar(bytes(64)) == secret_scalar(bytes(32))
  with pytest.raises(ValueError):
    secret_scalar(bytes(31))

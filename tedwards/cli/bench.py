from secrets import randbelow
from time import perf_counter

import nacl.bindings as sodium
from tqdm import tqdm

from tedwards.cli import load_curve, parse_int
from tedwards.exceptions import CliArgError
from tedwards.util import tobytes


def main_bench(args):
  rounds = parse_int(args.rounds)
  if rounds < 1:
    raise CliArgError("Need at least one round")
  ec = load_curve(args.curve)
  scalars = [ec.scalar(1 + randbelow(ec.q - 1)) for i in range(rounds)]

  t0 = perf_counter()
  for k in tqdm(scalars, desc=f"{ec.curve!r}", unit="mul", leave=False):
    ec.curve.mul(k, ec.G)
  dur = perf_counter() - t0
  print(f"tedwards {ec.curve!r} {rounds / dur:8.1f} mul/s  ({dur / rounds * 1e3:.2f} ms each)")

  if ec.curve.name != "ed25519":
    return
  # Libsodium baseline for the same scalars
  t0 = perf_counter()
  for k in scalars:
    sodium.crypto_scalarmult_ed25519_base_noclamp(tobytes(k.val))
  dur = perf_counter() - t0
  print(f"libsodium ed25519 {rounds / dur:8.1f} mul/s  ({dur / rounds * 1e3:.3f} ms each)")

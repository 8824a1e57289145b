import sys
from typing import NoReturn

import tedwards

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  mul=f"{C}tedwards {F}mul {N}scalar {D}[{F}-c {N}curve{D}] [{F}--raw{D}]{N}\n",
  check=f"{C}tedwards {F}check {N}x y {D}[{F}-c {N}curve{D}] —{N} test that an affine point is on the curve\n",
  bench=f"{C}tedwards {F}bench {D}[{F}-c {N}curve{D}] [{F}-n {N}rounds{D}] —{N} time scalar multiplications\n",
)

usagetext = dict(
  mul=f"""\
Multiply the curve generator by a scalar and print the resulting point. The
scalar may be decimal or 0x prefixed hex and is reduced modulo the group order.

  {F}-c {N}curve          Curve name: ed25519 (default) or bandersnatch
  {F}--raw{N}             Print extended coordinates (X, Y, T, Z) instead of (x, y)
""",
  check=f"""\
Coordinates are given as integers (decimal or 0x hex) and reduced modulo the
field prime. Exits with an error when the point is not on the curve.
""",
  bench=f"""\
Runs random scalar multiplications of the generator. On ed25519 the same
multiplications are also timed with libsodium for comparison.

  {F}-n {N}rounds         Number of multiplications (default 20)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"tedwards {tedwards.__version__} - Twisted Edwards curve arithmetic"

shorthelp = f"""\
{T}{introduction:78}{N}
{"".join(usage.values())}
  {F}-c {N}curve          Curve name: ed25519 (default) or bandersnatch
  {F}--debug{N}           Show full tracebacks on errors
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None or modehelp == "help": stream.write(shorthelp)
  else: stream.write(cmdhelp[modehelp])
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"tedwards {tedwards.__version__}")
  sys.exit(0)

from tedwards.cli import load_curve, parse_int
from tedwards.exceptions import CliArgError


def main_mul(args):
  if len(args.files) != 1:
    raise CliArgError("Exactly one scalar is required")
  ec = load_curve(args.curve)
  k = ec.scalar(parse_int(args.files[0]))
  P = ec.curve.mul(k, ec.G)
  if args.raw:
    print(repr(P))
  else:
    print(P)

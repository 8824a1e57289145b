from tedwards.cli import load_curve, parse_int
from tedwards.exceptions import CliArgError
from tedwards.point import Point


def main_check(args):
  if len(args.files) != 2:
    raise CliArgError("Both x and y coordinates are required")
  ec = load_curve(args.curve)
  x, y = (ec.fe(parse_int(c)) for c in args.files)
  if Point.from_affine(x, y) not in ec.curve:
    raise ValueError(f"Point is not on the curve {ec.curve!r}")
  print(f"on curve {ec.curve!r}")

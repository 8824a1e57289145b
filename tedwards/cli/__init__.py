from importlib import import_module

from tedwards.exceptions import CliArgError

# Curve instance modules, imported only when asked for
curves = dict(
  ed25519="tedwards.ed25519",
  bandersnatch="tedwards.bandersnatch",
)


def load_curve(name: str):
  """Return the module of a named curve instance (with curve, fe, scalar, G)."""
  if name.lower() not in curves:
    raise CliArgError(f"Unknown curve {name!r}, expected one of: {', '.join(curves)}")
  return import_module(curves[name.lower()])


def parse_int(s: str) -> int:
  try:
    return int(s, 0)
  except ValueError:
    raise CliArgError(f"Not an integer: {s!r}") from None

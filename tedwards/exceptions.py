class CurveError(ValueError):
  """Curve parameters are degenerate or the generator is not on the curve"""

class CliArgError(ValueError):
  """Invalid CLI argument"""

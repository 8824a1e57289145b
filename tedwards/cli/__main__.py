import sys
from typing import NoReturn

import colorama

from tedwards.cli.args import argparse
from tedwards.cli.bench import main_bench
from tedwards.cli.check import main_check
from tedwards.cli.mul import main_mul
from tedwards.exceptions import CliArgError

modes = {
  "mul": main_mul,
  "check": main_check,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 10 Any other error (point not on curve, invalid input)

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except CliArgError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()

import sys

from tedwards.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.curve = "ed25519"
    self.rounds = "20"
    self.raw = None
    self.debug = None


mulargs = dict(
  curve='-c --curve'.split(),
  raw='--raw'.split(),
  debug='--debug'.split(),
)

checkargs = dict(
  curve='-c --curve'.split(),
  debug='--debug'.split(),
)

benchargs = dict(
  curve='-c --curve'.split(),
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('mul', 'mult'): return 'mul', mulargs
  if arg in ('check', ): return 'check', checkargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing, as negative scalars and coordinates must not look like flags
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💥  Invalid or missing command (mul/check/bench/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  for a in aiter:
    if not a.startswith('-') or a[1:2].isdigit():
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    argvar = next((k for k, v in ad.items() if a.lower() in v), None)
    if argvar is None:
      print_help(args.mode, f' 💥  Unknown argument: tedwards {args.mode} {a}')
    try:
      var = getattr(args, argvar)
      if isinstance(var, str):
        setattr(args, argvar, next(aiter))
      else:
        setattr(args, argvar, True)
    except StopIteration:
      print_help(args.mode, f' 💥  Argument parameter missing: tedwards {args.mode} {a} …')

  return args

"""run a command with a PATH that does not contain a given command

unpath runs CMD with a modified PATH that does not contain UNCMD. Every PATH
directory holding UNCMD is replaced with a temporary directory of symlinks to
everything else in it, so CMD can still run every other command.
"""

import argparse
import os
import sys

from .. import __version__
from ..cli.arghparse import ArgumentParser
from ..cli.exceptions import ExitException
from ..path import rewrite_path
from ..process import CommandNotFound, spawn

epilog = """\
examples:
  %(prog)s cat ./script script-arg

  %(prog)s cat CMD subcmd-arg

  %(prog)s cat %(prog)s env CMD
"""

# show the real name in usage examples when run as "python -m unpath"
prog = 'unpath' if os.path.basename(sys.argv[0]) == '__main__.py' else None

argparser = ArgumentParser(
    prog=prog, description=__doc__.split('\n', 1)[0], epilog=epilog,
    version=f'unpath {__version__}')
argparser.add_argument('uncmd', metavar='UNCMD', help='the command to hide from PATH')
argparser.add_argument('cmd', metavar='CMD', help='the command to run with the modified PATH')
cmd_args = argparser.add_argument(
    'args', metavar='ARGS', nargs=argparse.REMAINDER, default=[],
    help='arguments passed through to CMD')
# argparse marks REMAINDER positionals as required
cmd_args.required = False


@argparser.bind_main_func
def main(options, out, err):
    path = rewrite_path(options.uncmd)
    out.flush()
    err.flush()
    try:
        status = spawn([options.cmd] + options.args, path)
    except CommandNotFound as e:
        raise ExitException(f'{e.command}: command not found') from e
    except OSError as e:
        raise ExitException(f'{options.cmd}: {e.strerror}') from e
    # the command's own status isn't passed on
    return 0 if status == 0 else 1

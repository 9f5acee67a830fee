"""Argparse actions and parser extensions used by the command-line tool."""

import argparse
from argparse import SUPPRESS
import logging
import sys
import traceback


class EnableDebug(argparse._StoreTrueAction):

    def __call__(self, parser, namespace, values, option_string=None):
        super().__call__(parser, namespace, values, option_string=option_string)
        parser.debug = True
        logging.root.setLevel(logging.DEBUG)


class Verbosity(argparse.Action):

    def __init__(self, option_strings, dest, default=None, required=False, help=None):
        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0,
            default=default, required=required, help=help)

        # map verbose/quiet args to increment/decrement the underlying verbosity value
        self.value_map = {
            '-q': -1,
            '--quiet': -1,
            '-v': 1,
            '--verbose': 1,
        }

    def __call__(self, parser, namespace, values, option_string=None):
        change = self.value_map.get(option_string, 0)
        count = getattr(namespace, self.dest, 0)
        new = count + change
        # enable info level logs when running in a heightened verbosity state
        if new >= 2:
            logging.root.setLevel(logging.INFO)
        setattr(namespace, self.dest, new)
        parser.verbosity = new


class Namespace(argparse.Namespace):
    """Add support for popping attrs from the namespace."""

    _sentinel = object()

    def pop(self, key, default=_sentinel):
        """Remove and return an object from the namespace if it exists."""
        try:
            val = getattr(self, key)
        except AttributeError:
            if default is not self._sentinel:
                return default
            raise
        delattr(self, key)
        return val


class ArgumentParser(argparse.ArgumentParser):
    """Extended, argparse-compatible argument parser.

    Adds the base options shared by our tools, main function binding, and
    output routed through the formatters a
    :py:class:`unpath.cli.tool.Tool` attaches as ``out`` and ``err``.
    """

    def __init__(self, debug=True, quiet=True, verbose=True, version=None,
                 add_help=True, formatter_class=argparse.RawDescriptionHelpFormatter,
                 **kwds):
        self.debug = False
        self.verbosity = 0
        self.out = self.err = None

        super().__init__(formatter_class=formatter_class, add_help=False, **kwds)

        base_opts = self.add_argument_group('base options')
        if add_help:
            base_opts.add_argument(
                '-h', '--help', action='help', default=SUPPRESS,
                help='show this help message and exit')
        if version is not None:
            base_opts.add_argument(
                '--version', action='version', version=version,
                help="show this program's version info and exit")
        if debug:
            base_opts.add_argument(
                '--debug', action=EnableDebug, help='enable debugging checks')
        if quiet:
            base_opts.add_argument(
                '-q', '--quiet', action=Verbosity, dest='verbosity', default=0,
                help='suppress non-error messages')
        if verbose:
            base_opts.add_argument(
                '-v', '--verbose', action=Verbosity, dest='verbosity', default=0,
                help='show verbose output')

    def parse_args(self, args=None, namespace=None):
        if namespace is None:
            namespace = Namespace()
        # reset parse state left over from a previous run
        self.debug = False
        self.verbosity = 0

        args, unknown_args = self.parse_known_args(args, namespace)
        if unknown_args:
            self.error('unrecognized arguments: %s' % ' '.join(unknown_args))
        return args

    def _print_message(self, message, file=None):
        if not message:
            return
        formatter = self.err if file is sys.stderr else self.out
        if formatter is None:
            return super()._print_message(message, file)
        formatter.write(message, autoline=False)
        formatter.flush()

    def error(self, message, status=1):
        """Print the full help text and an error message, then exit.

        Unlike argparse's error() the exit status defaults to 1 and the
        complete help is shown instead of only the usage line.
        """
        if self.debug and sys.exc_info() != (None, None, None):
            # output traceback if any exception is on the stack
            traceback.print_exc()
        self.print_help(sys.stderr)
        self.exit(status, '\n%s: error: %s\n' % (self.prog, message))

    def bind_main_func(self, functor):
        """Decorator to set a main function for the parser."""
        self.set_defaults(main_func=functor)
        self.set_defaults(prog=self.prog)
        return functor


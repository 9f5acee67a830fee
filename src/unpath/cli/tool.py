"""Runner turning a parser and its bound main function into a command."""

import logging
import os
import sys
import traceback
from contextlib import nullcontext
from signal import signal, SIGPIPE, SIG_DFL, SIGINT

from .exceptions import ExitException, find_user_exception
from .. import formatters
from ..log import suppress_logging


class Tool:
    """Run the main function bound to a parser, mapping errors to exit statuses.

    The main function is called as ``func(options, out, err)`` where `out` and
    `err` are :py:class:`unpath.formatters.PlainTextFormatter` instances.
    """

    def __init__(self, parser, outfile=None, errfile=None):
        """
        :param parser: :py:class:`unpath.cli.arghparse.ArgumentParser` with a
            bound main function
        :param outfile: stream for regular output, defaults to sys.stdout
        :param errfile: stream for errors and logs, defaults to sys.stderr
        """
        if parser is None:
            raise ValueError("invalid argparser")
        self.parser = parser
        self.options = None
        self.args = None

        self._outfile = sys.stdout if outfile is None else outfile
        self._errfile = sys.stderr if errfile is None else errfile
        self.out = self.parser.out = formatters.PlainTextFormatter(self._outfile)
        self.err = self.parser.err = formatters.PlainTextFormatter(self._errfile)

    def __call__(self, args=None):
        """Run the tool on `args` (sys.argv[1:] if None), returning the exit status."""
        self.args = args
        try:
            return self.main()
        except ExitException as e:
            if self.parser.debug:
                raise
            if not isinstance(e.code, str):
                return e.code
            self.err.error(e.code)
            self.err.flush()
            return 1

    def parse_args(self, args=None, namespace=None):
        """Parse `args`, returning the options and the bound main function.

        Also routes log records through the error formatter from here on.
        """
        options = self.parser.parse_args(args=args, namespace=namespace)
        main_func = options.pop('main_func', None)
        if main_func is None:
            raise RuntimeError("argparser missing main method")

        self.out.verbosity = self.err.verbosity = getattr(options, 'verbosity', 0)

        # replace the handler installed by logging.basicConfig()
        if logging.root.handlers:
            logging.root.handlers.pop(0)
        logging.root.addHandler(FormattingHandler(self.err))

        return options, main_func

    def handle_exec_exception(self, e):
        """Report a user error and return 1, re-raising anything else."""
        exc = find_user_exception(e)
        if self.parser.debug or exc is None:
            raise
        if self.parser.verbosity > 0:
            msg = exc.msg(self.parser.verbosity).strip('\n')
            if msg:
                self.err.write(msg)
        self.err.write(f'{self.parser.prog}: error: {exc}')
        return 1

    def main(self):
        """Parse arguments and run the main function."""
        exitstatus = -10

        # die quietly on broken pipes
        signal(SIGPIPE, SIG_DFL)

        try:
            self.options, func = self.parse_args(args=self.args, namespace=self.options)
            if self.parser.verbosity < 0 and not self.parser.debug:
                quiet = suppress_logging(logging.WARNING)
            else:
                quiet = nullcontext()
            with quiet:
                exitstatus = func(self.options, self.out, self.err)
        except SystemExit as e:
            # argparse exits on usage errors, --help and --version
            exitstatus = e.code
        except KeyboardInterrupt:
            self._errfile.write('keyboard interrupted- exiting')
            if self.parser.debug:
                self._errfile.write('\n')
                traceback.print_exc()
            signal(SIGINT, SIG_DFL)
            os.killpg(os.getpgid(0), SIGINT)
        except Exception as e:
            self.out.flush()
            self.err.flush()
            exitstatus = self.handle_exec_exception(e)

        self.out.flush()
        self.err.flush()
        return exitstatus


class FormattingHandler(logging.Handler):
    """Logging handler writing records through a formatter.

    The first line of a record is prefixed with ``LEVEL name: ``, following
    lines are indented to line up with its colon.
    """

    def __init__(self, formatter):
        super().__init__()
        # "formatter" is taken by logging.Handler
        self.out = formatter

    def emit(self, record):
        prefixes = (f'{record.levelname} {record.name}: ',)
        later = ((len(record.levelname) + len(record.name)) * ' ' + ' : ',)
        try:
            for line in self.format(record).split('\n'):
                self.out.write(line, prefixes=prefixes)
                prefixes = later
        except Exception:
            self.handleError(record)

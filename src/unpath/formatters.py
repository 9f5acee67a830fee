"""Prefixed line output on top of a file-like object."""

import errno


__all__ = ("PlainTextFormatter", "StreamClosed")


class StreamClosed(KeyboardInterrupt):
    """Raised by :py:func:`PlainTextFormatter.write` when the reader went away.

    Closing a pager early should stop the tool like control+c does, hence the
    KeyboardInterrupt base.
    """


class PlainTextFormatter:
    """Write plain text lines to a stream, each line starting with prefixes.

    :ivar first_prefix: strings written before the first line of every write.
    :ivar later_prefix: strings written before each following line.
    :ivar autoline: end every write with a newline unless told otherwise.
    :ivar verbosity: verbosity level of the tool owning this formatter.
    """

    def __init__(self, stream):
        self.stream = stream
        self.autoline = True
        self.verbosity = 0
        self.first_prefix = []
        self.later_prefix = []
        self._pos = 0
        self._in_first_line = True

    def _emit(self, thing):
        while callable(thing):
            thing = thing(self)
        if thing is None:
            return
        thing = str(thing)
        self._pos += len(thing)
        self.stream.write(thing)

    def write(self, *args, autoline=None, prefixes=()):
        """Write the given objects, then a newline if `autoline` is set.

        None is skipped and callables are called with the formatter, their
        result being written in their place. `prefixes` are appended to both
        prefix lists for this write only.
        """
        if autoline is None:
            autoline = self.autoline
        self.first_prefix.extend(prefixes)
        self.later_prefix.extend(prefixes)
        try:
            for arg in args:
                if not self._pos:
                    prefix = self.first_prefix if self._in_first_line else self.later_prefix
                    for thing in prefix:
                        self._emit(thing)
                self._emit(arg)
            if autoline:
                self.stream.write('\n')
                self._pos = 0
                self._in_first_line = True
        except IOError as e:
            if e.errno == errno.EPIPE:
                raise StreamClosed(e)
            raise
        finally:
            if prefixes:
                del self.first_prefix[-len(prefixes):]
                del self.later_prefix[-len(prefixes):]

    def error(self, message):
        """Write `message` as an error line."""
        self.write(message, prefixes=('!!! ',))

    def flush(self):
        self.stream.flush()

"""Exceptions understood by :py:class:`unpath.cli.tool.Tool`."""

from ..errors import walk_exception_chain


class UserException(Exception):
    """Error whose string is meant for users rather than a traceback.

    Subclasses can override :py:meth:`msg` to add detail shown with ``-v``.
    """

    def msg(self, verbosity=0):
        return ''


class ExitException(Exception):
    """Exit the tool with a status code, or with status 1 and an error message.

    Kept apart from SystemExit so debug mode can tell our own exits from
    those of third party code.
    """

    def __init__(self, code=None):
        self.code = code


def find_user_exception(exc):
    """Return the first UserException in the cause chain of `exc`, if any."""
    for e in walk_exception_chain(exc):
        if isinstance(e, UserException):
            return e
    return None

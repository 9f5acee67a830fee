"""Shadow directories: symlink mirrors of a directory minus one entry."""

__all__ = ("ShadowError", "shadow_dir")

import os
import tempfile

from .cli.exceptions import UserException


class ShadowError(UserException):
    """Creating a shadow directory or one of its symlinks failed.

    :ivar entry: name of the entry whose symlink failed, None if the shadow
        directory itself couldn't be created
    """

    def __init__(self, path, error, entry=None):
        super().__init__(f'failed shadowing {path!r}: {error}')
        self.path = path
        self.error = error
        self.entry = entry

    def msg(self, verbosity=0):
        if self.entry is None:
            return f'unable to create a temporary directory for {self.path!r}'
        return f'unable to link entry {self.entry!r} of {self.path!r}'


def shadow_dir(path, entries, exclude):
    """Mirror a directory through symlinks, leaving out a single entry.

    The mirror is a new temporary directory that is never removed by us; it
    lives until the system's temp reaping gets to it.

    :param path: source directory
    :param entries: entry names of `path`, as returned by
        :py:func:`unpath.osutils.probe_dir`
    :param exclude: index into `entries` of the entry to leave out
    :return: path of the shadow directory
    :raises ShadowError: if the directory or any symlink can't be created
    """
    source = os.path.abspath(path)
    try:
        # abspath() strips trailing slashes, keeping the name hint for "/usr/bin/"
        tmpdir = tempfile.mkdtemp(prefix=os.path.basename(source))
    except OSError as e:
        raise ShadowError(path, e) from e

    for i, name in enumerate(entries):
        if i == exclude:
            continue
        try:
            os.symlink(os.path.join(source, name), os.path.join(tmpdir, name))
        except OSError as e:
            raise ShadowError(path, e, entry=name) from e

    return tmpdir

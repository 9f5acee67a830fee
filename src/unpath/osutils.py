"""
OS related functionality
"""

__all__ = ("probe_dir",)

from bisect import bisect_left
import os

from .log import logger


def probe_dir(path, name):
    """Look for an entry named `name` directly inside a directory.

    Unreadable directories (missing, not a directory, no permission) are
    treated as not containing `name`; search paths commonly carry stale
    entries and those must not abort the caller.

    :param path: directory to scan
    :param name: bare entry name to look for
    :return: tuple of (sorted entry names, index of `name` in them or None)
    """
    try:
        entries = sorted(os.listdir(path))
    except OSError as e:
        logger.debug("skipping unreadable directory %r: %s", path, e.strerror)
        return [], None
    i = bisect_left(entries, name)
    if i < len(entries) and entries[i] == name:
        return entries, i
    return entries, None

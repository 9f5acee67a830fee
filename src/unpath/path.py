"""Search path rewriting.

A search path is rewritten by probing every one of its directories
concurrently; directories holding the command to hide are swapped for a
shadow directory (see :py:mod:`unpath.shadow`), everything else is passed
through untouched. The result always has the same number of elements in the
same order as the input.
"""

__all__ = ("PATH_SEP", "split_path", "join_path", "rewrite_path")

from concurrent.futures import ThreadPoolExecutor
import os

from .log import logger
from .osutils import probe_dir
from .shadow import shadow_dir

PATH_SEP = ":"


def split_path(path):
    """Split a search path into its directories, keeping empty elements."""
    return path.split(PATH_SEP)


def join_path(dirs):
    """Inverse of :py:func:`split_path`."""
    return PATH_SEP.join(dirs)


def _unpath_dir(path, command):
    entries, i = probe_dir(path, command)
    if i is None:
        return path
    shadow = shadow_dir(path, entries, i)
    logger.info("hiding %r from %r via %r", command, path, shadow)
    return shadow


def rewrite_path(command, path=None):
    """Rewrite a search path so `command` can't be resolved through it.

    Each directory is handled by its own worker; all of them are waited on
    before any result is used. Failures are reported by path position rather
    than completion order, so the same input always raises the same error.

    :param command: bare command name to hide
    :param path: search path to rewrite, defaults to the PATH environment
        variable (an empty string if unset)
    :return: the rewritten search path
    :raises unpath.shadow.ShadowError: if a shadow directory couldn't be created
    """
    if path is None:
        path = os.environ.get("PATH", "")
    dirs = split_path(path)
    results = [None] * len(dirs)

    def worker(i, d):
        try:
            results[i] = (_unpath_dir(d, command), None)
        except Exception as e:
            results[i] = (None, e)

    with ThreadPoolExecutor(max_workers=len(dirs), thread_name_prefix="unpath") as executor:
        for i, d in enumerate(dirs):
            executor.submit(worker, i, d)

    for i, (new_dir, exc) in enumerate(results):
        if exc is not None:
            raise exc
        dirs[i] = new_dir
    return join_path(dirs)

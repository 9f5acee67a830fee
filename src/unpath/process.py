"""Process related utilities."""

__all__ = ("CommandNotFound", "find_binary", "spawn")

import errno
import os
import subprocess

from .log import logger
from .path import split_path


def find_binary(binary: str, paths=None, fallback=None) -> str:
    """look through the PATH environment, finding the binary to execute

    A binary given as a path is checked directly; one that exists but isn't
    executable raises PermissionError.
    """

    if os.path.sep in binary:
        if not os.path.isfile(binary):
            raise CommandNotFound(binary)
        if not os.access(binary, os.X_OK):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), binary)
        return binary

    if paths is None:
        paths = split_path(os.environ.get("PATH", ""))

    for path in paths:
        filename = os.path.join(os.path.abspath(path), binary)
        if os.access(filename, os.X_OK) and os.path.isfile(filename):
            return filename

    if fallback is not None:
        return fallback

    raise CommandNotFound(binary)


def spawn(cmd, path, env=None) -> int:
    """Run a command with a replaced search path, waiting for it to finish.

    The command inherits our stdout and stderr, stdin is the null device.
    A bare command name is resolved against `path` rather than our own PATH.

    :param cmd: command and its arguments
    :param path: search path the command runs with
    :param env: environment to base the command's environment on, defaults to
        ours
    :return: the command's exit status; negative if killed by a signal
    :raises CommandNotFound: if the command can't be found in `path`
    :raises OSError: if the command fails to start
    """
    executable = find_binary(cmd[0], paths=split_path(path))
    env = dict(os.environ if env is None else env)
    env["PATH"] = path
    logger.debug("running %r from %r", cmd, executable)
    proc = subprocess.run(cmd, executable=executable, env=env, stdin=subprocess.DEVNULL)
    return proc.returncode


class CommandNotFound(Exception):

    def __init__(self, command):
        super().__init__(f'failed to find binary: {command!r}')
        self.command = command

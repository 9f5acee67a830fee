"""
unpath

Run a command with a search path that no longer resolves one named executable.

Every PATH directory containing the hidden command is swapped for a temporary
shadow directory of symlinks to everything else in it, so the child process
keeps access to all other commands.
"""

__title__ = "unpath"
__version__ = "0.1.0"
__version_info__ = (0, 1, 0)

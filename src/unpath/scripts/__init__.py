"""Console script entry points."""

from importlib import import_module
import sys

from ..cli.tool import Tool


def run(script_name):
    """Run the tool defined by a script module and exit with its status."""
    module = import_module(f'{__name__}.{script_name}')
    tool = Tool(module.argparser)
    sys.exit(tool())


def main():
    run('unpath')

"""Logger used across unpath."""

from contextlib import contextmanager
import logging

from . import __title__


# give the root logger a handler up front so records from our logger are shown
# before a Tool installs its own
logging.basicConfig()

logger = logging.getLogger(__title__)


@contextmanager
def suppress_logging(level=logging.CRITICAL):
    """Drop log records at `level` and below while the context is active."""
    orig_level = logging.root.manager.disable
    logging.disable(level)
    try:
        yield
    finally:
        logging.disable(orig_level)

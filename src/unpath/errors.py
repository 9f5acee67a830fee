"""Exception chain helpers."""


def walk_exception_chain(exc):
    """Yield an exception followed by every exception it was raised from."""
    while exc is not None:
        yield exc
        exc = exc.__cause__

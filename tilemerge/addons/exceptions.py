"""
Errors raised by the engine.
"""


class InvalidConfiguration(ValueError):
    """
    Raised when an engine is built with settings it cannot play with.

    The error is raised before any state is created, so callers never receive a partially
    initialized board or session.
    """

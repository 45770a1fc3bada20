"""Exceptions raised at the playlist service boundary.

The timing and import code never raises for malformed input; only the
external playlist source can fail.
"""


class PlaylistCalculatorError(Exception):
    """Base class for errors raised by this package."""


class ServiceError(PlaylistCalculatorError):
    """Raised when a playlist source cannot be reached or read."""


class AuthenticationError(ServiceError):
    """Raised when a playlist source rejects the supplied credential."""

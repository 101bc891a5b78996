# wayfinder/errors.py
"""Exceptions raised by wayfinder.

Malformed or unrecognised links never raise; they resolve to ``None``.
These errors cover programmer and configuration mistakes only.
"""


class WayfinderError(Exception):
    """Base class for all custom errors raised by wayfinder."""


class InvalidFactoryError(WayfinderError, TypeError):
    """Raised when a destination factory is neither callable nor a DestinationType."""


class SettingsError(WayfinderError):
    """Raised when the settings file cannot be read or has the wrong shape."""


class FactoryImportError(WayfinderError):
    """Raised when a ``module:attr`` factory reference cannot be imported."""

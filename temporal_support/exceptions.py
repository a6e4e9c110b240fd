"""
Exceptions raised by temporal_support.

Errors coming from the Temporal SDK itself are never wrapped, they propagate
to the caller unchanged.
"""


class TemporalSupportError(Exception):
    """Base class for all temporal_support errors."""


class InvalidOptionError(TemporalSupportError, ValueError):
    """An option value cannot be turned into a valid SDK option."""


class AttributeUsageError(TemporalSupportError, TypeError):
    """An attribute was applied or read in an unsupported way."""

"""
Errors raised by the review engine.

All of them are contract signals for the caller (the UI or a script);
nothing in core.review catches or retries them.
"""


class ReviewError(Exception):
    """Base class for review engine errors."""


class ConfigurationError(ReviewError):
    """A status has no defined interval, or the interval policy is unknown."""


class NoEntriesDue(ReviewError):
    """No entry matched the filters and was due. Not fatal."""


class InvalidSessionState(ReviewError):
    """The caller answered an entry that is not current, or after completion."""

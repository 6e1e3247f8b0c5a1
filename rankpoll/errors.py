"""Exception types shared across the poll core."""


class PollError(Exception):
    """Base class for all poll errors."""
    pass


class ConfigurationError(PollError, ValueError):
    """Raised when the caller's setup is inconsistent.

    Examples: a point scheme whose length does not match the option set, or
    a missing store URL. These are defects in how the poll was configured,
    not bad user data, so they are never silently degraded.
    """
    pass


class InputError(PollError, ValueError):
    """Raised when an operation is asked to work on unusable input."""
    pass


class StoreError(PollError):
    """Raised when the external data store rejects or fails a request."""
    pass

"""Error definitions for the sentence rotator.

Every error raised here signals a programming-invariant violation or a
bad argument at setup time. None of them are transient, so nothing in
the package retries.
"""


class SubstituteError(Exception):
    """Base exception for all custom errors."""


class InvalidInput(SubstituteError):
    """Raised when a sentence (or sentence collection) is not usable text."""


class MissingContainer(SubstituteError):
    """Raised when the configured mount point cannot be found."""


class EmptyQueue(SubstituteError):
    """Raised when a tick dequeues from an empty plan queue."""


class ConfigurationError(SubstituteError):
    """Raised when rotator options fail validation."""

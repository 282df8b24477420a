"""Error types raised by the bootstrap engine."""


class BootstrapError(Exception):
    """Base class for every recoverable engine error."""


class InvalidParameter(BootstrapError, ValueError):
    """A parameter is outside its valid domain (e.g. a non-positive df)."""


class EmptySample(BootstrapError):
    """The base sample is empty, so there is nothing to resample or summarise."""


class InsufficientData(BootstrapError):
    """A sequence is too short for the requested summary."""

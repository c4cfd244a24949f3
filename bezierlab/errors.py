"""Exception types raised by the curve engine and its renderers."""


class ConfigurationError(ValueError):
    """A curve or renderer was set up with unusable parameters."""


class InvalidInputError(ValueError):
    """A geometry query received input it cannot work with."""


__all__ = ["ConfigurationError", "InvalidInputError"]

class NumberLineError(ValueError):
    """Base class for errors raised by the number line."""


class ConfigurationError(NumberLineError):
    """Raised when NumberLineOptions cannot describe a valid number line."""


class InvalidScaleError(NumberLineError):
    """Raised when a view model cannot be built for the current scale or length."""

"""Typed exceptions for pattern lookup, compilation and match spans."""


class PatternError(ValueError):
    """Base class for pattern related errors."""


class PatternCompileError(PatternError):
    """Raised when a built-in pattern literal fails to compile."""


class UnknownPatternError(PatternError, KeyError):
    """Raised when a pattern is requested by a name the registry does not know."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class SpanOutOfBoundsError(ValueError):
    """Raised when span coordinates are invalid or out of bounds."""


class ConfigFormatError(ValueError):
    """Raised when a configuration file does not hold a YAML mapping."""

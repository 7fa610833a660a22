from __future__ import annotations


class JustifyError(RuntimeError):
    """Base class for every fatal condition raised while justifying text."""


class InputError(JustifyError):
    """Raised when the input document cannot be justified as given."""


class EncodingError(InputError):
    """Raised when the input is not single-byte ISO-8859-1 text."""


class ConfigurationError(JustifyError):
    """Raised when a configuration value is missing or out of range."""


class InfeasibleParagraphError(JustifyError):
    """Raised when no line-break plan exists for a paragraph."""


class InternalConsistencyError(JustifyError):
    """Raised when a breakpoint table does not advance."""

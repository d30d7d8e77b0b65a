"""Exception hierarchy for vocabulary generation."""


class VocabWriterError(Exception):
    """Base class for all vocabwriter errors."""


class ConfigurationError(VocabWriterError, ValueError):
    """Raised for missing or malformed operator-supplied configuration."""


class WriterStateError(VocabWriterError, RuntimeError):
    """Raised when the generator receives a call its current state forbids."""


class UndefinedTermError(VocabWriterError, KeyError):
    """Raised when a term reference cannot be resolved to a URI."""

    def __init__(self, reference: str, reason: str = "undefined term"):
        super().__init__(reference)
        self.reference = reference
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.reason}: {self.reference}"


class InputError(VocabWriterError):
    """Raised when the input document cannot be read or parsed."""

"""Exceptions raised by the form helpers."""


class FormForError(Exception):
    """Base class for all formfor errors."""


class UnknownOperationError(FormForError, AttributeError):
    """Raised when a decorated form is asked for an operation it cannot forward."""

    def __init__(self, operation: str, decorator: object, wrapped: object):
        self.operation = operation
        super().__init__(
            f"Method {operation} does not exist in {type(decorator).__name__} "
            f"or the underlying {type(wrapped).__name__} object"
        )


class TranslationFileError(FormForError):
    """Raised when a translation file cannot be turned into lookup keys."""


class ConfigurationError(FormForError):
    """Raised when a settings file has an unusable shape."""

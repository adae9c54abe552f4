from pydantic import ValidationError

from tensorzero_content._errors import Error, ErrorKind


class BaseError(Exception):
    def __init__(self, error: Error) -> None:
        self.message = error.message
        self.error = error

    def __str__(self) -> str:
        """Return a string representation of the error."""
        return self.message


class ContentError(BaseError):
    """raise error related to text content blocks."""


class DecodeError(ContentError):
    """raise error when a JSON object cannot be decoded into a content type."""

    kind = ErrorKind.INVALID

    def __init__(self, target: str, message: str, details: list[dict] | None = None) -> None:
        super().__init__(
            Error(
                kind=self.kind,
                description=f"Error decoding {target}: {message}",
                details=details,
            ),
        )

    @classmethod
    def from_validation_error(cls, target: str, error: ValidationError) -> "DecodeError":
        details = error.errors(include_url=False, include_context=False, include_input=False)
        first = details[0] if details else None
        if first is None:
            return cls(target, str(error), details)

        error_class = _ERRORS_BY_KIND.get(first["type"], DecodeError)
        return error_class(target, first["msg"], details)


class TypeMismatchError(DecodeError):
    """raise error when a recognized key holds the wrong JSON value kind."""

    kind = ErrorKind.TYPE_MISMATCH


class MutualExclusionError(DecodeError):
    """raise error when both alternative keys are present."""

    kind = ErrorKind.MUTUAL_EXCLUSION


class MissingFieldError(DecodeError):
    """raise error when neither alternative key is present."""

    kind = ErrorKind.MISSING_FIELD


class UnknownFieldError(DecodeError):
    """raise error when a strict type receives an unrecognized key."""

    kind = ErrorKind.UNKNOWN_FIELD


_ERRORS_BY_KIND: dict[str, type[DecodeError]] = {
    ErrorKind.TYPE_MISMATCH: TypeMismatchError,
    ErrorKind.MUTUAL_EXCLUSION: MutualExclusionError,
    ErrorKind.MISSING_FIELD: MissingFieldError,
    ErrorKind.UNKNOWN_FIELD: UnknownFieldError,
    "missing": MissingFieldError,
    "string_type": TypeMismatchError,
    "dict_type": TypeMismatchError,
}

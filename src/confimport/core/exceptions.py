"""Typed parse failures for confimport."""


class ParseError(Exception):
    """Base class for every failure raised by the parsers.

    Callers catch this and show ``str(error)`` next to the import control.
    """

    kind = "parse_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnrecognizedFormatError(ParseError):
    """Input matches no known dialect or JSON shape."""

    kind = "unrecognized_format"


class MalformedPayloadError(ParseError):
    """A dialect was recognized but its payload could not be decoded."""

    kind = "malformed_payload"


class MissingFieldError(ParseError):
    """A structurally valid input lacks a mandatory field."""

    kind = "missing_field"

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Missing required field: {field}")
        self.field = field


class EmptyContentError(ParseError):
    """No usable body remains after structural parsing."""

    kind = "empty_content"

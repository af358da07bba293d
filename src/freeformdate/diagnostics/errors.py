"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateParseError",
    "DateParserError",
    "HintError",
]


class DateParserError(Exception):
    """Base exception for all freeformdate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateParserError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateParseError(DateParserError):
    """Free-form date input could not be turned into a timestamp.

    Returned (not raised) by parse_freeform(), mirroring the "never raise"
    contract of the parsing functions.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        parse_type: What was being parsed ('datetime', 'hint')

    Example:
        >>> result, errors = parse_freeform("not a date")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed: {error.input_value} ({error.parse_type})")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            parse_type: Type of parsing ('datetime', 'hint')
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.parse_type = parse_type


class HintError(DateParserError):
    """Caller supplied a pattern hint that cannot be attempted.

    Raised by hint constructors when the regex does not compile; hints with
    an empty field map are skipped by the parser and reported instead.
    """

"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def parse_no_match(value: str, locale_code: str, tries: int = 0) -> Diagnostic:
        """No template, hint or cached pattern matched the input.

        Args:
            value: The input string
            locale_code: Locale whose word table was used
            tries: Candidate patterns attempted

        Returns:
            Diagnostic for PARSE_NO_MATCH, carrying the attempt count
        """
        msg = (
            f"No date template matched '{value}' after {tries} candidate patterns "
            f"(locale: {locale_code})"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_MATCH,
            message=msg,
            hint="Pass a pattern hint or check that the locale matches the input language",
            tries=tries,
        )

    @staticmethod
    def parse_partial_match(value: str, unparsed: str) -> Diagnostic:
        """Best match left part of the input unconsumed.

        Args:
            value: The input string
            unparsed: Leftover text

        Returns:
            Diagnostic for PARSE_PARTIAL_MATCH (warning)
        """
        msg = f"Date in '{value}' matched partially; unparsed: '{unparsed}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_PARTIAL_MATCH,
            message=msg,
            hint="Inspect result.unparsed to decide whether the match is acceptable",
            severity="warning",
        )

    @staticmethod
    def parse_input_type(received: str) -> Diagnostic:
        """Input value was not a string.

        Args:
            received: Name of the received type

        Returns:
            Diagnostic for PARSE_INPUT_TYPE
        """
        msg = f"Expected string, got {received}"
        return Diagnostic(code=DiagnosticCode.PARSE_INPUT_TYPE, message=msg)

    @staticmethod
    def parse_attempts_exhausted(value: str, limit: int) -> Diagnostic:
        """Attempt budget ran out before a full match was found.

        Args:
            value: The input string
            limit: Configured max_attempts

        Returns:
            Diagnostic for PARSE_ATTEMPTS_EXHAUSTED (warning)
        """
        msg = f"Stopped after {limit} candidate patterns while parsing '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_ATTEMPTS_EXHAUSTED,
            message=msg,
            hint="Raise ParserConfig.max_attempts or pass a pattern hint",
            severity="warning",
        )

    @staticmethod
    def hint_empty_field_map(pattern: str) -> Diagnostic:
        """Regex hint was supplied without a field map.

        Args:
            pattern: The hint's regex source

        Returns:
            Diagnostic for HINT_EMPTY_FIELD_MAP
        """
        msg = f"Pattern hint '{pattern}' has no field map and was not attempted"
        return Diagnostic(
            code=DiagnosticCode.HINT_EMPTY_FIELD_MAP,
            message=msg,
            hint="Map date parts to capture groups, e.g. {'year': 1, 'month': 2, 'day': 3}",
        )

    @staticmethod
    def hint_invalid_regex(pattern: str, reason: str) -> Diagnostic:
        """Regex hint does not compile.

        Args:
            pattern: The hint's regex source
            reason: Compiler error text

        Returns:
            Diagnostic for HINT_INVALID_REGEX
        """
        msg = f"Pattern hint '{pattern}' is not a valid regular expression: {reason}"
        return Diagnostic(code=DiagnosticCode.HINT_INVALID_REGEX, message=msg)

    @staticmethod
    def hint_group_out_of_range(pattern: str, index: int, groups: int) -> Diagnostic:
        """Field map refers to a capture group the hint's regex does not have.

        Args:
            pattern: The hint's regex source
            index: Offending group index
            groups: Number of groups the regex opens

        Returns:
            Diagnostic for HINT_GROUP_OUT_OF_RANGE
        """
        msg = f"Pattern hint '{pattern}' has {groups} groups; field map refers to group {index}"
        return Diagnostic(
            code=DiagnosticCode.HINT_GROUP_OUT_OF_RANGE,
            message=msg,
            hint="Group indices start at 1 and count every '(' that opens a capture",
        )

    @staticmethod
    def locale_unknown(locale_code: str, fallback: str) -> Diagnostic:
        """Locale could not be resolved; fallback word table used.

        Args:
            locale_code: Requested locale
            fallback: Locale actually used

        Returns:
            Diagnostic for LOCALE_UNKNOWN (warning)
        """
        msg = f"Unknown locale '{locale_code}', using '{fallback}' word table"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP 47 or POSIX locale code known to Babel (e.g. 'de_DE')",
            severity="warning",
        )

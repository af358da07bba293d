"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by parse errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Parsing errors (free-form date input)
        4100-4199: Caller contract errors (hints, locale selectors)
    """

    # Parsing errors (4000-4099)
    PARSE_NO_MATCH = 4001
    PARSE_PARTIAL_MATCH = 4002
    PARSE_INPUT_TYPE = 4003
    PARSE_ATTEMPTS_EXHAUSTED = 4004

    # Caller contract errors (4100-4199)
    HINT_EMPTY_FIELD_MAP = 4101
    HINT_INVALID_REGEX = 4102
    LOCALE_UNKNOWN = 4103
    HINT_GROUP_OUT_OF_RANGE = 4104


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
        tries: Candidate patterns attempted, for search outcomes
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    tries: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[PARSE_NO_MATCH]: No date template matched 'not a date'
              = help: Pass a pattern hint or check the locale

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)

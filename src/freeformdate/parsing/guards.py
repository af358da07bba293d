"""Type guard functions for parse result narrowing.

parse_freeform() returns tuple[ParseResult | None, tuple[DateParseError, ...]]
and DateParser.run() returns ParseResult | None. The guards check the result
component so mypy can narrow it.

All guards accept None and return False.

Example:
    >>> result, errors = parse_freeform("05/21/2009 xyz")
    >>> if is_parse_result(result):
    ...     print(result.unparsed)
     xyz
    >>> is_full_match(result)
    False

Python 3.13+ with TypeIs support (PEP 742).
"""

from typing import TypeIs

from freeformdate.parsing.assembler import ParseResult

__all__ = [
    "is_full_match",
    "is_parse_result",
]


def is_parse_result(value: ParseResult | None) -> TypeIs[ParseResult]:
    """Type guard: Check if a parser call produced a result (full or partial).

    Args:
        value: Result from run() or parse_freeform() (may be None)

    Returns:
        True if value is a ParseResult
    """
    return value is not None


def is_full_match(value: ParseResult | None) -> TypeIs[ParseResult]:
    """Type guard: Check if a parser call consumed the whole input.

    Partial matches return False, so ``if is_full_match(result)`` accepts
    only results with nothing left over.

    Args:
        value: Result from run() or parse_freeform() (may be None)

    Returns:
        True if value is a ParseResult with an empty ``unparsed``
    """
    return value is not None and value.is_full_match

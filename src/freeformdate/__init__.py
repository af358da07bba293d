"""freeformdate - Parse free-form date strings of unknown format.

Turns dates scraped from web pages, feeds and e-mail ("Thursday, May 7,
2009 on 20:00", "7. svibnja 2009.", "05/21/2009") into a normalized UTC
timestamp. An ordered library of date templates is expanded through
synonyms, compiled to locale-aware regular expressions and matched until
one consumes the whole input; otherwise the best partial match wins.

Public API:
    DateParser - Reusable parser (config, word cache, recent pattern)
    ParserConfig - Immutable parser configuration
    ParseResult - Normalized UTC timestamp plus match metadata
    RegexHint, TemplateHint - Caller-supplied patterns tried first
    parse_freeform - Functional API, never raises
    MethodUsed - Search stage that produced a result

Exceptions:
    DateParserError - Base exception class
    DateParseError - Parse failure record (returned, not raised)
    HintError - Invalid pattern hint

Submodules:
    freeformdate.patterns - Template library, synonyms, compiler
    freeformdate.parsing - Matcher, assembler, search engine
    freeformdate.locale - Locale word tables and their cache
    freeformdate.diagnostics - Error codes, messages and exceptions
"""

# Essential Public API - Minimal exports for clean namespace
from .config import ParserConfig
from .diagnostics import DateParseError, DateParserError, HintError
from .enums import DatePart, MethodUsed
from .parsing import DateParser, ParseResult, RegexHint, TemplateHint, parse_freeform

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("freeformdate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateParseError",
    "DateParser",
    "DateParserError",
    "DatePart",
    "HintError",
    "MethodUsed",
    "ParseResult",
    "ParserConfig",
    "RegexHint",
    "TemplateHint",
    "__version__",
    "parse_freeform",
]

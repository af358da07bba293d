"""Free-form date parser: search plan over hints, recent pattern and library.

Search plan (each stage runs only while there is no full match):

    Stage              MethodUsed        Candidates
    -----------------  ----------------  ------------------------------------
    1. hints           TEMPLATE_HINT,    caller hints, in the order given
                       REGEX_HINT
    2. recent pattern  RECENT_PATTERN    the last winning library template
    3. library sweep   LOCALE_FORMAT,    every template in DATE_TEMPLATES,
                       LIBRARY_REGEX     expanded through its synonyms

A full match (nothing left over) ends the search at once. Otherwise every
match competes on leftover length: a strictly shorter leftover replaces
the best so far, ties keep the earlier candidate. When the library sweep
finds a new best its template is written to the recent-pattern slot.

Architecture:
    - DateParser: Owns configuration, word cache, recent slot, month aliases
    - RecentPatternSlot: One-slot, lock-guarded cache of the last winner
    - RegexHint / TemplateHint: Caller-supplied patterns tried first
    - parse_freeform: Functional API that never raises

Thread Safety:
    The word cache and recent slot are lock-guarded, so one DateParser may
    be shared. Threads sharing it race only on which template the recent
    slot holds; pass a RecentPatternSlot per thread to avoid that.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from threading import Lock

from freeformdate.config import ParserConfig
from freeformdate.diagnostics import (
    DateParseError,
    Diagnostic,
    ErrorTemplate,
    HintError,
)
from freeformdate.enums import DatePart, MethodUsed
from freeformdate.locale.words import LocaleWordCache, LocaleWords
from freeformdate.locale_utils import locale_candidates, normalize_locale
from freeformdate.parsing.assembler import (
    ParseResult,
    ResolvedDate,
    build_result,
    resolve_date,
)
from freeformdate.parsing.matcher import MatchOutcome, match_pattern
from freeformdate.patterns.compiler import HOUR_TOKEN_RE, compile_template
from freeformdate.patterns.expander import SynonymExpansion
from freeformdate.patterns.fields import FieldMap, FieldRule, MonthAliases, as_field_map
from freeformdate.patterns.library import DELEGATED_TEMPLATES, sweep_templates
from freeformdate.patterns.locale_formats import locale_templates

__all__ = [
    "DateParser",
    "Hint",
    "LocaleSelector",
    "RecentPatternSlot",
    "RegexHint",
    "TemplateHint",
    "library_candidate_count",
    "parse_freeform",
]

logger = logging.getLogger(__name__)

type LocaleSelector = str | Sequence[str]


class RecentPatternSlot:
    """Holds the most recently successful library template.

    One slot, overwritten on each new winner. Thread-safe.

    Example:
        >>> slot = RecentPatternSlot()
        >>> slot.get() is None
        True
        >>> slot.set("%Y-%m-%d")
        >>> slot.get()
        '%Y-%m-%d'
    """

    __slots__ = ("_lock", "_template")

    def __init__(self, template: str | None = None) -> None:
        self._lock = Lock()
        self._template = template

    def get(self) -> str | None:
        """Return the remembered template, or None."""
        with self._lock:
            return self._template

    def set(self, template: str) -> None:
        """Remember a template, replacing the previous one."""
        with self._lock:
            self._template = template

    def clear(self) -> None:
        """Forget the remembered template."""
        with self._lock:
            self._template = None


def _check_group_indices(pattern: str, regex: re.Pattern[str], field_map: FieldMap) -> None:
    for rule in field_map.values():
        if not 1 <= rule.index <= regex.groups:
            raise HintError(
                ErrorTemplate.hint_group_out_of_range(pattern, rule.index, regex.groups)
            )


@dataclass(frozen=True, slots=True)
class RegexHint:
    """Caller regex with its own field map.

    String patterns are compiled case-insensitively; a pre-compiled pattern
    is used with the flags it already has. Plain integers in the field map
    mean DirectCapture, and string keys are DatePart values.

    A hint with an empty field map is accepted here but never attempted;
    the parser reports it as a diagnostic instead.

    Raises:
        HintError: If the regex does not compile or the field map refers to
            a group the regex does not have

    Example:
        >>> hint = RegexHint(r"(\\d{4})(\\d{2})(\\d{2})", {"year": 1, "month": 2, "day": 3})
        >>> hint.field_map[DatePart.MONTH]
        DirectCapture(index=2)
    """

    pattern: str | re.Pattern[str]
    field_map: Mapping[DatePart | str, FieldRule | int]
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.pattern, re.Pattern):
            regex = self.pattern
        else:
            try:
                regex = re.compile(self.pattern, re.IGNORECASE)
            except re.error as e:
                raise HintError(ErrorTemplate.hint_invalid_regex(self.pattern, str(e))) from e
        field_map = as_field_map(self.field_map)
        _check_group_indices(regex.pattern, regex, field_map)
        object.__setattr__(self, "regex", regex)
        object.__setattr__(self, "field_map", field_map)

    @property
    def source(self) -> str:
        """Regex source text."""
        return self.regex.pattern


@dataclass(frozen=True, slots=True)
class TemplateHint:
    """Caller template, compiled against the call's locale as written.

    The template is not expanded through synonyms.
    """

    template: str


type Hint = RegexHint | TemplateHint


@dataclass(frozen=True, slots=True)
class _Candidate:
    """One pattern the search will try."""

    method: MethodUsed
    regex: re.Pattern[str]
    field_map: FieldMap
    pattern_used: str
    autoregex: bool
    has_time: bool
    remember: bool = False


@dataclass(frozen=True, slots=True)
class _Best:
    candidate: _Candidate
    outcome: MatchOutcome
    resolved: ResolvedDate


def library_candidate_count() -> int:
    """Number of concrete templates a complete default library sweep tries.

    This is the attempt count of a call that matches nothing, with no
    hints, an empty recent slot and locale formats disabled.
    """
    return sum(len(SynonymExpansion(template)) for template in sweep_templates())


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DateParser:
    """Parses free-form date strings of unknown format.

    Construct once and reuse: compiled patterns and word tables are cached.

    Example:
        >>> from datetime import UTC
        >>> parser = DateParser(ParserConfig(tzinfo=UTC))
        >>> result = parser.run("2009-05-07 20:00")
        >>> result.gmt, result.time_faked
        ('2009-05-07 20:00:00', False)
        >>> parser.run("not a date") is None
        True
    """

    __slots__ = ("_aliases", "_clock", "_config", "_recent", "_words")

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        word_cache: LocaleWordCache | None = None,
        recent: RecentPatternSlot | None = None,
        month_aliases: Sequence[str] = (),
        month_alias_groups: int = 0,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Create a parser.

        Args:
            config: Parser configuration (defaults to ParserConfig())
            word_cache: Locale word tables; a private cache if omitted. A
                supplied cache keeps its own fallback locale, which takes
                precedence over ParserConfig.fallback_locale (a warning is
                logged when the two differ)
            recent: Recent-pattern slot; a private slot if omitted
            month_aliases: Extra full-month spellings (regex fragments)
            month_alias_groups: Capture groups the alias fragments open
            clock: Source of "now" for defaults of absent date parts

        Raises:
            ValueError: If the month aliases are not valid regex fragments
                or open a different number of groups than declared
        """
        self._config = config if config is not None else ParserConfig()
        if word_cache is None:
            word_cache = LocaleWordCache(fallback_locale=self._config.fallback_locale)
        elif word_cache.fallback_locale != normalize_locale(self._config.fallback_locale):
            logger.warning(
                "Word cache falls back to '%s', overriding configured fallback '%s'",
                word_cache.fallback_locale,
                self._config.fallback_locale,
            )
        self._words = word_cache
        self._recent = recent if recent is not None else RecentPatternSlot()
        self._aliases = MonthAliases(tuple(month_aliases), month_alias_groups)
        self._clock = clock

    @property
    def config(self) -> ParserConfig:
        """Parser configuration."""
        return self._config

    @property
    def recent(self) -> RecentPatternSlot:
        """Recent-pattern slot consulted before the library sweep."""
        return self._recent

    @property
    def word_cache(self) -> LocaleWordCache:
        """Locale word table cache."""
        return self._words

    @property
    def month_aliases(self) -> MonthAliases:
        """Extra full-month spellings in effect."""
        return self._aliases

    def set_month_aliases(
        self, names: Sequence[str] = (), groups: int = 0
    ) -> tuple[tuple[str, ...], int]:
        """Replace the month aliases.

        Args:
            names: Extra full-month spellings; position i means month i % 12 + 1
            groups: Capture groups the fragments open

        Returns:
            The previous (names, groups) pair

        Raises:
            ValueError: If the fragments are invalid or the group count is wrong
        """
        previous = self._aliases
        self._aliases = MonthAliases(tuple(names), groups)
        return previous.names, previous.groups

    def run(
        self,
        text: str,
        hints: Sequence[Hint] = (),
        locale: LocaleSelector | None = None,
    ) -> ParseResult | None:
        """Parse a free-form date string.

        Args:
            text: Input text
            hints: Patterns to try before the library, in order
            locale: Locale code, or candidate codes tried in order;
                None uses ParserConfig.default_locale

        Returns:
            ParseResult for the best match, or None if nothing matched

        Raises:
            TypeError: If text is not a string
        """
        result, _ = self.run_with_diagnostics(text, hints, locale)
        return result

    def run_with_diagnostics(
        self,
        text: str,
        hints: Sequence[Hint] = (),
        locale: LocaleSelector | None = None,
    ) -> tuple[ParseResult | None, tuple[Diagnostic, ...]]:
        """Parse like run() and also report what went wrong or was skipped.

        Diagnostics cover unknown locales, hints that could not be tried,
        partial matches, an exhausted attempt budget and the no-match case.
        The no-match diagnostic carries the number of candidates tried in
        Diagnostic.tries.

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            msg = ErrorTemplate.parse_input_type(type(text).__name__).message
            raise TypeError(msg)

        diagnostics: list[Diagnostic] = []
        selector = self._config.default_locale if locale is None else locale
        words = self._resolve_words(selector, diagnostics)
        subject = text.strip() if self._config.strip_input else text
        aliases = self._aliases
        today = self._today()
        limit = self._config.max_attempts

        tries = 0
        best: _Best | None = None
        for candidate in self._plan(hints, words, aliases, diagnostics):
            if limit is not None and tries >= limit:
                diagnostics.append(ErrorTemplate.parse_attempts_exhausted(text, limit))
                logger.debug("Attempt budget of %d exhausted", limit)
                break
            tries += 1
            outcome = match_pattern(
                subject, candidate.regex, candidate.field_map, words, aliases
            )
            if outcome is None:
                continue
            resolved = resolve_date(
                outcome, has_time=candidate.has_time, config=self._config, today=today
            )
            if resolved is None:
                logger.debug("Rejected %r: not a calendar date", candidate.pattern_used)
                continue
            if best is None or len(outcome.unparsed) < len(best.outcome.unparsed):
                best = _Best(candidate, outcome, resolved)
                if candidate.remember:
                    self._recent.set(candidate.pattern_used)
            if outcome.is_full:
                logger.debug(
                    "Full match by %s: %r", candidate.method.name, candidate.pattern_used
                )
                break

        if best is None:
            diagnostics.append(ErrorTemplate.parse_no_match(text, words.locale_code, tries))
            return None, tuple(diagnostics)
        if not best.outcome.is_full:
            diagnostics.append(ErrorTemplate.parse_partial_match(text, best.outcome.unparsed))

        candidate = best.candidate
        result = build_result(
            text,
            best.outcome,
            best.resolved,
            method_used=candidate.method,
            pattern_used=candidate.pattern_used,
            autoregex=candidate.autoregex,
            field_map=candidate.field_map,
            regex=candidate.regex.pattern,
            tries=tries,
            locale_code=words.locale_code,
        )
        return result, tuple(diagnostics)

    def _resolve_words(
        self, selector: LocaleSelector, diagnostics: list[Diagnostic]
    ) -> LocaleWords:
        candidates = locale_candidates(selector)
        words = self._words.resolve(candidates)
        if words.locale_code not in candidates:
            requested = ", ".join(candidates) or "''"
            diagnostics.append(ErrorTemplate.locale_unknown(requested, words.locale_code))
        return words

    def _today(self) -> date:
        now = self._clock()
        if now.tzinfo is None:
            return now.date()
        zone = self._config.tzinfo
        return (now.astimezone(zone) if zone is not None else now.astimezone()).date()

    def _plan(
        self,
        hints: Sequence[Hint],
        words: LocaleWords,
        aliases: MonthAliases,
        diagnostics: list[Diagnostic],
    ) -> Iterator[_Candidate]:
        """Yield candidates in search-plan order, compiling lazily."""
        for hint in hints:
            match hint:
                case RegexHint(field_map=field_map) if not field_map:
                    logger.warning("Skipping pattern hint %r: empty field map", hint.source)
                    diagnostics.append(ErrorTemplate.hint_empty_field_map(hint.source))
                case RegexHint(field_map=field_map):
                    yield _Candidate(
                        method=MethodUsed.REGEX_HINT,
                        regex=hint.regex,
                        field_map=field_map,  # type: ignore[arg-type]
                        pattern_used=hint.source,
                        autoregex=False,
                        has_time=DatePart.HOUR in field_map,
                    )
                case TemplateHint(template=template):
                    yield self._compiled(
                        MethodUsed.TEMPLATE_HINT, template, words, aliases, remember=False
                    )

        if (recent := self._recent.get()) is not None:
            logger.debug("Replaying recent pattern %r", recent)
            yield self._compiled(MethodUsed.RECENT_PATTERN, recent, words, aliases)

        include_delegated = self._config.locale_formats
        for template in sweep_templates(include_delegated=include_delegated):
            if template in DELEGATED_TEMPLATES:
                for concrete in locale_templates(words.locale_code, template):
                    yield self._compiled(MethodUsed.LOCALE_FORMAT, concrete, words, aliases)
                continue
            for concrete in SynonymExpansion(template):
                yield self._compiled(MethodUsed.LIBRARY_REGEX, concrete, words, aliases)

    @staticmethod
    def _compiled(
        method: MethodUsed,
        template: str,
        words: LocaleWords,
        aliases: MonthAliases,
        *,
        remember: bool = True,
    ) -> _Candidate:
        pattern = compile_template(template, words, aliases)
        return _Candidate(
            method=method,
            regex=pattern.regex,
            field_map=pattern.field_map,
            pattern_used=template,
            autoregex=True,
            has_time=HOUR_TOKEN_RE.search(template) is not None,
            remember=remember,
        )


def parse_freeform(
    value: str,
    locale: LocaleSelector | None = None,
    *,
    hints: Sequence[Hint] = (),
    parser: DateParser | None = None,
) -> tuple[ParseResult | None, tuple[DateParseError, ...]]:
    """Parse a free-form date string without raising.

    Args:
        value: Input text
        locale: Locale code or candidate codes; None uses the parser default
        hints: Patterns to try before the library
        parser: Parser to use; a fresh DateParser() if omitted (no recent
            pattern carries over between calls)

    Returns:
        Tuple of (result, errors):
        - result: ParseResult (possibly a partial match), or None
        - errors: Tuple of DateParseError for error-severity diagnostics
          (empty tuple on success, including partial matches)

    Examples:
        >>> result, errors = parse_freeform("2009-05-07")
        >>> result.pattern_used, result.time_faked
        ('%Y-%m-%d', True)
        >>> errors
        ()

        >>> result, errors = parse_freeform("not a date")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'PARSE_NO_MATCH'
    """
    engine = parser if parser is not None else DateParser()
    locale_code = "" if locale is None else ", ".join(locale_candidates(locale))

    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_input_type(type(value).__name__)  # type: ignore[unreachable]
        error = DateParseError(
            diagnostic, input_value=str(value), locale_code=locale_code, parse_type="datetime"
        )
        return (None, (error,))

    result, diagnostics = engine.run_with_diagnostics(value, hints, locale)
    if result is not None:
        locale_code = result.locale_code
    errors = tuple(
        DateParseError(
            diagnostic,
            input_value=value,
            locale_code=locale_code,
            parse_type="hint" if diagnostic.code.name.startswith("HINT_") else "datetime",
        )
        for diagnostic in diagnostics
        if diagnostic.severity == "error"
    )
    return (result, errors)

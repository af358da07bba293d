"""Template expander: enumerate every synonym combination of a template.

A template such as "%d. %m %Y" stands for many concrete templates:
"%d%O. %B %Y", "%e. %b %y", and so on. SynonymExpansion enumerates them
lazily by treating the expansion index as a mixed-radix number, one digit
per date part present in the template.

Digit order follows synonym-table registration order (weekday, day,
month, year, hour, minute, second); the first present part is the most
significant digit. Index 0 is therefore the combination of every group's
first (most specific) token, and the last index uses every group's last.

Example:
    >>> expansion = SynonymExpansion("%m/%d")
    >>> len(expansion)  # 4 day spellings x 4 month spellings
    16
    >>> expansion[0]
    '%B/%d%O'
    >>> expansion[15]
    '%m/%e'
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from freeformdate.enums import DatePart
from freeformdate.patterns.synonyms import DATEPART_SYNONYMS, SynonymTable, synonym_regex

__all__ = ["SynonymExpansion", "expand_template"]


@dataclass(frozen=True, slots=True)
class SynonymExpansion(Sequence[str]):
    """Lazy, restartable sequence of concrete templates.

    Supports len(), indexing (including negative indices) and repeated
    iteration; every pass yields the same templates in the same order.

    Attributes:
        template: Template to expand
        synonyms: Synonym table (None selects DATEPART_SYNONYMS)
    """

    template: str
    synonyms: SynonymTable | None = None
    _groups: tuple[tuple[DatePart, tuple[str, ...]], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        table = DATEPART_SYNONYMS if self.synonyms is None else self.synonyms
        groups = tuple(
            (part, tuple(tokens))
            for part, tokens in table.items()
            if tokens and synonym_regex(tuple(tokens)).search(self.template)
        )
        object.__setattr__(self, "_groups", groups)

    @property
    def parts(self) -> tuple[DatePart, ...]:
        """Date parts present in the template, in digit order."""
        return tuple(part for part, _ in self._groups)

    def __len__(self) -> int:
        count = 1
        for _, tokens in self._groups:
            count *= len(tokens)
        return count

    def __getitem__(self, index: int) -> str:  # type: ignore[override]
        total = len(self)
        if index < 0:
            index += total
        if not 0 <= index < total:
            msg = f"expansion index {index} out of range for {total} combinations"
            raise IndexError(msg)

        result = self.template
        radix = total
        for _, tokens in self._groups:
            radix //= len(tokens)
            digit, index = divmod(index, radix)
            chosen = tokens[digit]
            result = synonym_regex(tokens).sub(lambda _m, token=chosen: token, result)
        return result

    def __iter__(self) -> Iterator[str]:
        for index in range(len(self)):
            yield self[index]


def expand_template(template: str, synonyms: SynonymTable | None = None) -> Iterator[str]:
    """Iterate over every concrete template the template stands for.

    Shorthand for ``iter(SynonymExpansion(template, synonyms))``.
    """
    return iter(SynonymExpansion(template, synonyms))

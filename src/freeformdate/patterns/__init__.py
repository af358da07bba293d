"""Date templates and their compilation to regular expressions.

Public API:
    Templates:
        DATE_TEMPLATES - Ordered template library, most specific first
        sweep_templates - Templates visited by the library sweep
        locale_templates - CLDR-derived templates for %c / %x

    Expansion:
        DATEPART_SYNONYMS - Date part -> interchangeable tokens
        SynonymExpansion - Lazy sequence of concrete templates

    Compilation:
        compile_template - Concrete template -> CompiledPattern
        DirectCapture, LookupTable, NamedConversion - Field rules
        MonthAliases - Extra full-month spellings

Python 3.13+.
"""

from .compiler import HOUR_TOKEN_RE, TOKEN_TABLE, CompiledPattern, TokenSpec, compile_template
from .expander import SynonymExpansion, expand_template
from .fields import (
    DirectCapture,
    FieldMap,
    FieldRule,
    LookupTable,
    MonthAliases,
    NamedConversion,
    as_field_map,
    as_field_rule,
    find_word,
)
from .library import (
    DATE_TEMPLATES,
    DELEGATED_TEMPLATES,
    LOCALE_DATE,
    LOCALE_STAMP,
    sweep_templates,
)
from .locale_formats import cldr_to_template, locale_templates
from .synonyms import DATEPART_SYNONYMS, SynonymTable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Templates
    "DATE_TEMPLATES",
    "DELEGATED_TEMPLATES",
    "LOCALE_DATE",
    "LOCALE_STAMP",
    "cldr_to_template",
    "locale_templates",
    "sweep_templates",
    # Expansion
    "DATEPART_SYNONYMS",
    "SynonymExpansion",
    "SynonymTable",
    "expand_template",
    # Compilation
    "HOUR_TOKEN_RE",
    "TOKEN_TABLE",
    "CompiledPattern",
    "TokenSpec",
    "compile_template",
    # Field rules
    "DirectCapture",
    "FieldMap",
    "FieldRule",
    "LookupTable",
    "MonthAliases",
    "NamedConversion",
    "as_field_map",
    "as_field_rule",
    "find_word",
]

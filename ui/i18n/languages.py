"""Language catalog entries and locale match patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ui.errors import ShapeError
from ui.i18n.translations import SUPPORTED_LANGS, TRANSLATIONS


@dataclass(frozen=True)
class Exact:
    """Matches a locale string by equality."""

    value: str

    def test(self, locale: str) -> bool:
        return self.value == locale


@dataclass(frozen=True)
class Pattern:
    """Matches a locale string when the regex is found anywhere in it."""

    regex: re.Pattern[str]

    def test(self, locale: str) -> bool:
        return self.regex.search(locale) is not None


MatchPattern = Exact | Pattern


def matches(pattern: MatchPattern, locale: str) -> bool:
    """Return True if the pattern accepts the locale string."""
    return pattern.test(locale)


def as_match_pattern(value: object) -> MatchPattern:
    """
    Coerce a str, compiled regex or MatchPattern to a MatchPattern.

    Raises:
        TypeError: For any other value.
    """
    if isinstance(value, (Exact, Pattern)):
        return value
    if isinstance(value, str):
        return Exact(value)
    if isinstance(value, re.Pattern):
        return Pattern(value)
    raise TypeError(f'Unsupported match pattern: {value!r}')


def as_match_patterns(value: object) -> tuple[MatchPattern, ...]:
    """Coerce a single pattern or a collection of patterns to a tuple."""
    if isinstance(value, (str, re.Pattern, Exact, Pattern)):
        return (as_match_pattern(value),)
    if isinstance(value, Iterable):
        return tuple(as_match_pattern(v) for v in value)
    raise TypeError(f'Unsupported match patterns: {value!r}')


@dataclass(frozen=True)
class Language:
    """
    A supported language.

    Attributes:
        id: Short unique language id, e.g. 'ukr'.
        display_name: Label shown in the language selection.
        style_variant: Class name suffix for language specific styling ('' for none).
        match_patterns: Patterns tested against the browser locale.
        is_current: Whether this is the active language.
        dictionary: Translation strings keyed by translation key.
    """

    id: str
    display_name: str
    style_variant: str = ''
    match_patterns: tuple[MatchPattern, ...] = ()
    is_current: bool = False
    dictionary: Mapping[str, str] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not (
            isinstance(self.id, str)
            and isinstance(self.display_name, str)
            and isinstance(self.style_variant, str)
            and isinstance(self.is_current, bool)
            and isinstance(self.dictionary, Mapping)
        ):
            raise ShapeError(f'Malformed language: {self!r}')
        object.__setattr__(self, 'match_patterns', as_match_patterns(self.match_patterns))

    def matches(self, locale: str) -> bool:
        """Return True if any of the match patterns accepts the locale."""
        return any(matches(p, locale) for p in self.match_patterns)

    def translate(self, key: str, **kwargs: object) -> str:
        """
        Translate a key with this language's dictionary.

        Args:
            key: Translation key.
            **kwargs: Optional format arguments.

        Returns:
            Translated string, or the key itself if missing.
        """
        text = self.dictionary.get(key, key)
        if kwargs:
            return text.format(**kwargs)
        return text


def build_default_catalog() -> list[Language]:
    """
    Build the built-in catalog with English marked current.

    English must stay first: it is the fallback when no locale matches.
    """
    # Patterns are anchored at the start so a region suffix like 'en-uk' cannot
    # select another language.
    return [
        Language(
            id='eng',
            display_name=SUPPORTED_LANGS['eng'],
            style_variant='',
            match_patterns=re.compile(r'^en-*'),
            is_current=True,
            dictionary=TRANSLATIONS['eng'],
        ),
        Language(
            id='ukr',
            display_name=SUPPORTED_LANGS['ukr'],
            style_variant='__i18n_ukr',
            match_patterns=re.compile(r'^uk'),
            is_current=False,
            dictionary=TRANSLATIONS['ukr'],
        ),
        Language(
            id='pl',
            display_name=SUPPORTED_LANGS['pl'],
            style_variant='__i18n_pl',
            match_patterns=re.compile(r'^pl'),
            is_current=False,
            dictionary=TRANSLATIONS['pl'],
        ),
    ]

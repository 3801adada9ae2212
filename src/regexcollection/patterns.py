"""Precompiled regular expressions exposed as named accessors.

Every pattern is a fixed literal bound to a registry name.  All literals are
compiled once, eagerly, when this module is imported; the accessors return the
same :class:`re.Pattern` object on every call.  Compiled patterns are immutable
and may be shared freely between threads.

A literal that fails to compile raises :class:`PatternCompileError` at import
time.  Matching never raises for ordinary input: "no match" is ``None`` from
``search``/``match`` or an empty iterator from :func:`iter_matches`.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .utils.errors import PatternCompileError, SpanOutOfBoundsError, UnknownPatternError
from .utils.logging import get_logger

__all__ = [
    "PatternDefinition",
    "PatternMatch",
    "DEFINITIONS",
    "spaces",
    "alpha_numeric_and_dash_underscore",
    "double_occurrences_of_dash_underscore",
    "uri_last_segment",
    "url",
    "dns_hostname",
    "spintax",
    "city_state_postal",
    "markdown_code_fence",
    "names",
    "definitions",
    "get_definition",
    "get_pattern",
    "iter_matches",
    "iter_line_matches",
]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class PatternDefinition:
    """A named pattern literal."""

    name: str
    pattern: str
    description: str
    flags: int = 0

    @property
    def anchored(self) -> bool:
        """True when the pattern only matches at the start of its input."""

        return self.pattern.startswith("^")


@dataclass(slots=True, frozen=True)
class PatternMatch:
    """One match produced by :func:`iter_matches`.

    ``start``/``end`` follow the half-open convention.  Zero-length matches
    are allowed, so only ``end < start`` is rejected.
    """

    name: str
    start: int
    end: int
    text: str
    groups: tuple[str | None, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start


# ---------------------------------------------------------------------------
# Pattern literals
# ---------------------------------------------------------------------------
# Hyphen goes last in the class: "\s-_" is a bad character range in ``re``.
DISALLOWED_SLUG_CHARS = r"[^a-z0-9\s_-]"

HOST_LABEL = r"[a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?"
HOST_TLD = r"[a-zA-Z]{2,}"

DEFINITIONS: tuple[PatternDefinition, ...] = (
    PatternDefinition(
        "spaces",
        r"\s",
        "any single whitespace character",
    ),
    PatternDefinition(
        "alpha_numeric_and_dash_underscore",
        DISALLOWED_SLUG_CHARS,
        "any character other than a-z, 0-9, whitespace, hyphen or underscore",
    ),
    PatternDefinition(
        "double_occurrences_of_dash_underscore",
        r"([-_]){2,}",
        "two or more consecutive hyphens/underscores in any mixture",
    ),
    PatternDefinition(
        "uri_last_segment",
        r"([^:]+://[^?]+)(/[^/?#]+)(.*$)",
        "URI split into (prefix, last path segment, query and rest)",
    ),
    PatternDefinition(
        "url",
        r"(?:https?://|www\.)[^ \f\n\r\t\v\]\[]+\b",
        "URL starting with http://, https:// or www.",
    ),
    PatternDefinition(
        "dns_hostname",
        rf"^({HOST_LABEL}\.)+{HOST_TLD}$",
        "anchored DNS hostname with an alphabetic TLD of 2+ letters",
    ),
    PatternDefinition(
        "spintax",
        r"\{\{\s*RANDOM\s*\|\s*(.*?)\s*\}\}",
        "spintax token {{ RANDOM | a | b }} capturing the option list",
    ),
    PatternDefinition(
        "city_state_postal",
        r"^(.*)\s+([A-Za-z]{2})\s+(\d{5}(?:-\d{4})?)$",
        "anchored 'City ST 12345[-6789]' capturing city, state and ZIP",
    ),
    PatternDefinition(
        "markdown_code_fence",
        r"^```[a-zA-Z]*\s*\n?",
        "opening Markdown code fence with optional language tag",
    ),
)


def _compile_all(defs: tuple[PatternDefinition, ...]) -> MappingProxyType[str, re.Pattern[str]]:
    compiled: dict[str, re.Pattern[str]] = {}
    for definition in defs:
        if definition.name in compiled:
            raise PatternCompileError(f"duplicate pattern name {definition.name!r}")
        try:
            compiled[definition.name] = re.compile(definition.pattern, definition.flags)
        except re.error as exc:
            raise PatternCompileError(f"pattern {definition.name!r} failed to compile: {exc}") from exc
        log.debug("compiled pattern %s: %s", definition.name, definition.pattern)
    return MappingProxyType(compiled)


_COMPILED = _compile_all(DEFINITIONS)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def spaces() -> re.Pattern[str]:
    """Match any single whitespace character."""

    return _COMPILED["spaces"]


def alpha_numeric_and_dash_underscore() -> re.Pattern[str]:
    """Match one character that is not ``a-z``, a digit, whitespace, ``-`` or ``_``.

    Uppercase letters count as disallowed; substitute matches with ``""`` to
    strip a lowercased string down to slug characters.
    """

    return _COMPILED["alpha_numeric_and_dash_underscore"]


def double_occurrences_of_dash_underscore() -> re.Pattern[str]:
    """Match runs of two or more ``-``/``_`` characters, e.g. ``--``, ``__`` or ``-_``.

    Group 1 holds the last character of the run.
    """

    return _COMPILED["double_occurrences_of_dash_underscore"]


def uri_last_segment() -> re.Pattern[str]:
    """Split a URI around its final path segment.

    For ``https://example.com/a/b?x=1`` the groups are
    ``("https://example.com/a", "/b", "?x=1")``.
    """

    return _COMPILED["uri_last_segment"]


def url() -> re.Pattern[str]:
    """Match URLs beginning with ``http://``, ``https://`` or ``www.``.

    A match extends until whitespace or a square bracket and ends on a word
    boundary, so trailing sentence punctuation is left out.
    """

    return _COMPILED["url"]


def dns_hostname() -> re.Pattern[str]:
    """Validate a DNS hostname (anchored).

    Labels are 1-63 ASCII alphanumerics with hyphens allowed only inside the
    label.  The final label is alphabetic and at least two characters long.
    Underscores and IDNs are rejected.  Total length (253) is not checked.
    """

    return _COMPILED["dns_hostname"]


def spintax() -> re.Pattern[str]:
    """Match ``{{ RANDOM | option1 | option2 }}`` capturing ``"option1 | option2"``."""

    return _COMPILED["spintax"]


def city_state_postal() -> re.Pattern[str]:
    """Match ``"City ST 12345"`` or ``"City ST 12345-6789"`` (anchored).

    Groups: city, two-letter state, postal code.
    """

    return _COMPILED["city_state_postal"]


def markdown_code_fence() -> re.Pattern[str]:
    """Match an opening code fence (three backticks, optional language) at the string start."""

    return _COMPILED["markdown_code_fence"]


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------


def names() -> tuple[str, ...]:
    """Return registry names in definition order."""

    return tuple(d.name for d in DEFINITIONS)


def definitions() -> tuple[PatternDefinition, ...]:
    return DEFINITIONS


def get_pattern(name: str) -> re.Pattern[str]:
    """Retrieve the compiled pattern registered under ``name``."""

    try:
        return _COMPILED[name]
    except KeyError:
        known = ", ".join(names())
        raise UnknownPatternError(f"unknown pattern {name!r}; expected one of: {known}") from None


def iter_matches(name: str, text: str) -> Iterator[PatternMatch]:
    """Return an iterator over non-overlapping matches of ``name`` in ``text``.

    The name is resolved immediately, so an unknown name raises before any
    iteration happens.
    """

    rx = get_pattern(name)
    return (
        PatternMatch(name, m.start(), m.end(), m.group(0), m.groups()) for m in rx.finditer(text)
    )


def get_definition(name: str) -> PatternDefinition:
    """Return the :class:`PatternDefinition` registered under ``name``."""

    get_pattern(name)
    return next(d for d in DEFINITIONS if d.name == name)


def iter_line_matches(name: str, text: str) -> Iterator[PatternMatch]:
    """Like :func:`iter_matches` but apply the pattern to each line separately.

    Lines are split on ``\\n`` and a trailing ``\\r`` is dropped before
    matching.  Offsets in the returned matches refer to ``text``.
    """

    get_pattern(name)
    return _iter_line_matches(name, text)


def _iter_line_matches(name: str, text: str) -> Iterator[PatternMatch]:
    offset = 0
    for line in text.split("\n"):
        for match in iter_matches(name, line.removesuffix("\r")):
            yield replace(match, start=match.start + offset, end=match.end + offset)
        offset += len(line) + 1

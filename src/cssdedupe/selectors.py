"""Selector matching: decides which rules the transform may touch.

The ``selector`` option arrives as one of several shapes and is compiled
once into a matcher variant:

    None / ""        -> MatchAll
    str              -> Substring   (plain containment, not CSS matching)
    re.Pattern       -> Pattern     (``pattern.search``)
    callable         -> Predicate   (truthiness of the return value)

Any other value is logged and treated as MatchAll.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Union

__all__ = [
    "MatchAll",
    "Substring",
    "Pattern",
    "Predicate",
    "SelectorMatcher",
    "build_matcher",
    "matches",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchAll:
    """Matches every selector."""

    def matches(self, selector_text: str) -> bool:
        return True


@dataclass(frozen=True)
class Substring:
    """Matches selectors containing ``needle`` anywhere."""

    needle: str

    def matches(self, selector_text: str) -> bool:
        return self.needle in selector_text


@dataclass(frozen=True)
class Pattern:
    """Matches selectors the compiled regular expression finds a hit in."""

    pattern: re.Pattern

    def matches(self, selector_text: str) -> bool:
        return self.pattern.search(selector_text) is not None


@dataclass(frozen=True)
class Predicate:
    """Matches selectors for which ``func`` returns a truthy value."""

    func: Callable[[str], Any]

    def matches(self, selector_text: str) -> bool:
        return bool(self.func(selector_text))


SelectorMatcher = Union[MatchAll, Substring, Pattern, Predicate]


def build_matcher(selector: object) -> SelectorMatcher:
    """Compile a ``selector`` option value into a matcher variant."""
    if isinstance(selector, (MatchAll, Substring, Pattern, Predicate)):
        return selector
    if selector is None or selector == "":
        return MatchAll()
    if isinstance(selector, str):
        return Substring(selector)
    if isinstance(selector, re.Pattern):
        return Pattern(selector)
    if callable(selector):
        return Predicate(selector)
    logger.warning(
        "Ignoring selector option of unsupported type %s; processing all rules",
        type(selector).__name__,
    )
    return MatchAll()


def matches(selector: object, selector_text: str) -> bool:
    """Return True if a rule with *selector_text* passes the *selector* filter."""
    return build_matcher(selector).matches(selector_text)

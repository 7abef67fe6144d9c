"""Transform configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Union

from cssdedupe.selectors import SelectorMatcher, build_matcher

SelectorOption = Union[str, re.Pattern, Callable[[str], bool], None]


@dataclass(frozen=True)
class DedupeOptions:
    """Options for the duplicate-value removal transform.

    Attributes:
        selector: Restricts which rules are processed.  A string matches any
            selector containing it, a compiled pattern matches when it
            searches true, a callable matches when it returns true.  ``None``
            processes every rule.
        preserve_empty: Keep rules that end up with no declarations instead
            of removing them.
    """

    selector: SelectorOption = None
    preserve_empty: bool = False

    @property
    def matcher(self) -> SelectorMatcher:
        return build_matcher(self.selector)

"""Remove declarations that the CSS cascade would override within a rule."""

from cssdedupe.errors import CssDedupeError, ParseError, TransformError
from cssdedupe.model import (
    AtRule,
    Comment,
    Declaration,
    DedupeOptions,
    DedupeReport,
    Rule,
    Stylesheet,
)
from cssdedupe.properties import is_vendor_prefixed
from cssdedupe.selectors import matches
from cssdedupe.stylesheet import parse_stylesheet, process_css, render_stylesheet
from cssdedupe.transforms import (
    RemoveDuplicateValuesTransform,
    apply_transforms,
    remove_duplicate_values,
    run,
)
from cssdedupe.transforms.pruner import prune
from cssdedupe.transforms.resolver import resolve

__all__ = [
    "AtRule",
    "Comment",
    "CssDedupeError",
    "Declaration",
    "DedupeOptions",
    "DedupeReport",
    "ParseError",
    "RemoveDuplicateValuesTransform",
    "Rule",
    "Stylesheet",
    "TransformError",
    "apply_transforms",
    "is_vendor_prefixed",
    "matches",
    "parse_stylesheet",
    "process_css",
    "prune",
    "remove_duplicate_values",
    "render_stylesheet",
    "resolve",
    "run",
]

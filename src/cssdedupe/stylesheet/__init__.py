from __future__ import annotations

from cssdedupe.model.options import SelectorOption
from cssdedupe.stylesheet.parser import parse_stylesheet
from cssdedupe.stylesheet.printer import render_stylesheet
from cssdedupe.transforms import remove_duplicate_values

__all__ = ["parse_stylesheet", "render_stylesheet", "process_css"]


def process_css(
    source: str, selector: SelectorOption = None, preserve_empty: bool = False
) -> str:
    """Parse *source*, remove duplicate values, and render the result."""
    tree = parse_stylesheet(source)
    remove_duplicate_values(selector=selector, preserve_empty=preserve_empty).apply(tree)
    return render_stylesheet(tree)

from __future__ import annotations

from collections.abc import Iterable

from cssdedupe.model.options import DedupeOptions, SelectorOption
from cssdedupe.model.tree import Stylesheet
from cssdedupe.transforms.base import Transform
from cssdedupe.transforms.dedupe import RemoveDuplicateValuesTransform, run

__all__ = [
    "RemoveDuplicateValuesTransform",
    "Transform",
    "apply_transforms",
    "remove_duplicate_values",
    "run",
]


def remove_duplicate_values(
    selector: SelectorOption = None, preserve_empty: bool = False
) -> RemoveDuplicateValuesTransform:
    """Create a duplicate-value removal transform with the given options."""
    return RemoveDuplicateValuesTransform(
        DedupeOptions(selector=selector, preserve_empty=preserve_empty)
    )


def apply_transforms(tree: Stylesheet, transforms: Iterable[Transform]) -> Stylesheet:
    """Apply *transforms* to *tree* in order."""
    for t in transforms:
        tree = t.apply(tree)
    return tree

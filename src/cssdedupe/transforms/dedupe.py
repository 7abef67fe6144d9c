"""Duplicate-value removal transform: walks a tree and cleans every rule."""

from __future__ import annotations

import logging

from cssdedupe.errors import TransformError
from cssdedupe.model.options import DedupeOptions
from cssdedupe.model.report import DedupeReport
from cssdedupe.model.tree import Container, Rule, Stylesheet
from cssdedupe.selectors import SelectorMatcher
from cssdedupe.transforms.pruner import is_empty, prune
from cssdedupe.transforms.resolver import resolve

__all__ = ["RemoveDuplicateValuesTransform", "run"]

logger = logging.getLogger(__name__)


def _process_rule(
    rule: Rule,
    matcher: SelectorMatcher,
    options: DedupeOptions,
    report: DedupeReport,
) -> None:
    if not matcher.matches(rule.selector):
        report.rules_skipped += 1
        return

    if not is_empty(rule):
        before = rule.declarations()
        resolve(rule)
        report.removed_declarations.extend(d for d in before if d.parent is not rule)

    if prune(rule, options.preserve_empty):
        report.rules_removed += 1


def run(tree: Stylesheet, options: DedupeOptions | None = None) -> DedupeReport:
    """Remove redundant declarations from every rule in *tree*, in place.

    Rules inside at-rule blocks (``@media``, ``@keyframes``...) are visited
    too; the at-rules themselves are never filtered.  A failure while
    processing one rule is logged and the walk carries on with the next.

    Raises:
        TransformError: *tree* is missing or has no child list to walk.
    """
    if tree is None or not isinstance(tree, Container) or tree.nodes is None:
        logger.error("Cannot remove duplicate values: %r is not a stylesheet tree", tree)
        raise TransformError(f"Expected a stylesheet tree, got {type(tree).__name__}")

    options = options or DedupeOptions()
    matcher = options.matcher
    report = DedupeReport()

    for rule in tree.walk_rules():
        report.rules_visited += 1
        try:
            _process_rule(rule, matcher, options, report)
        except Exception:
            report.rules_failed += 1
            logger.warning(
                "Failed to process rule %r; leaving it as is",
                getattr(rule, "selector", None),
                exc_info=True,
            )

    logger.debug("Duplicate value removal finished: %s", report)
    return report


class RemoveDuplicateValuesTransform:
    """Keep only the declaration that wins the cascade for each property.

    Within each rule, the last ``!important`` declaration of a property wins
    if there is one, otherwise the last declaration does.  Rules whose
    selector does not match ``options.selector`` are left untouched; rules
    left empty are removed unless ``options.preserve_empty`` is set.
    """

    def __init__(self, options: DedupeOptions | None = None) -> None:
        self.options = options or DedupeOptions()
        self.last_report: DedupeReport | None = None

    def apply(self, tree: Stylesheet) -> Stylesheet:
        self.last_report = run(tree, self.options)
        return tree

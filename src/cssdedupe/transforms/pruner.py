"""Removal of rules left without content."""

from __future__ import annotations

import logging

from cssdedupe.model.tree import Comment, Container

__all__ = ["is_empty", "prune"]

logger = logging.getLogger(__name__)


def is_empty(rule: Container) -> bool:
    """A rule is empty when every child (if any) is a comment."""
    return all(isinstance(child, Comment) for child in rule.nodes or [])


def prune(rule: Container, preserve_empty: bool = False) -> bool:
    """Detach *rule* if it is empty, unless *preserve_empty* is set.

    Returns True if the rule was removed.
    """
    if preserve_empty or not is_empty(rule):
        return False
    logger.debug("Removing empty rule %r", getattr(rule, "selector", rule.type))
    rule.remove()
    return True

"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from cssdedupe.model.tree import Stylesheet


class Transform(Protocol):
    """A tree-to-tree transformation step.  May mutate *tree* in place."""

    def apply(self, tree: Stylesheet) -> Stylesheet: ...

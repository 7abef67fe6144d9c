from cssdedupe.model.tree import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Rule,
    Stylesheet,
)
from cssdedupe.model.options import DedupeOptions
from cssdedupe.model.report import DedupeReport

__all__ = [
    "AtRule",
    "Comment",
    "Container",
    "Declaration",
    "DedupeOptions",
    "DedupeReport",
    "Node",
    "Rule",
    "Stylesheet",
]

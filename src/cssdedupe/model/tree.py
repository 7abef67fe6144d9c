"""Stylesheet tree model: mutable nodes with parent links.

The tree is owned by whoever parsed it.  Transforms mutate it in place;
a node is removed by detaching it from its parent's ``nodes`` list, which
keeps every other sibling (and any reference held to it) stable.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class Node:
    """Base class for every node in a stylesheet tree."""

    type = ""
    parent: Container | None = None

    def remove(self) -> None:
        """Detach this node from its parent.  No-op if already detached."""
        if self.parent is None:
            return
        siblings = self.parent.nodes or []
        for index, sibling in enumerate(siblings):
            if sibling is self:
                del siblings[index]
                break
        self.parent = None


class Container(Node):
    """A node that owns an ordered list of child nodes."""

    nodes: list[Node] | None

    def _adopt(self) -> None:
        for child in self.nodes or []:
            child.parent = self

    def append(self, *children: Node) -> Container:
        """Append *children* in order, detaching them from any old parent."""
        if self.nodes is None:
            self.nodes = []
        for child in children:
            child.remove()
            child.parent = self
            self.nodes.append(child)
        return self

    def declarations(self) -> list[Declaration]:
        """Return the direct declaration children, in order."""
        return [n for n in self.nodes or [] if isinstance(n, Declaration)]

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every rule below this container in document order."""
        for child in list(self.nodes or []):
            if isinstance(child, Rule):
                yield child
            if isinstance(child, Container):
                yield from child.walk_rules()


@dataclass(eq=False)
class Declaration(Node):
    """A single ``property: value[ !important]`` entry."""

    prop: str
    value: str
    important: bool = False

    type = "decl"


@dataclass(eq=False)
class Comment(Node):
    """An opaque comment; ``text`` excludes the ``/*`` and ``*/`` markers."""

    text: str = ""

    type = "comment"


@dataclass(eq=False)
class Rule(Container):
    """A selector plus its ordered child nodes."""

    selector: str
    nodes: list[Node] = field(default_factory=list)

    type = "rule"

    def __post_init__(self) -> None:
        self._adopt()


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media``, ``@keyframes`` or ``@import``.

    Conditional groups carry their nested rules in ``nodes``.  Statement
    at-rules (``@import "a.css";``) have ``nodes`` set to ``None``.
    """

    name: str
    params: str = ""
    nodes: list[Node] | None = None

    type = "atrule"

    def __post_init__(self) -> None:
        self._adopt()

    @property
    def has_block(self) -> bool:
        return self.nodes is not None


@dataclass(eq=False)
class Stylesheet(Container):
    """The root of a parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)

    type = "root"

    def __post_init__(self) -> None:
        self._adopt()

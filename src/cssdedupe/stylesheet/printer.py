"""Render a stylesheet tree back to CSS text."""

from __future__ import annotations

from cssdedupe.model.tree import AtRule, Comment, Declaration, Node, Rule, Stylesheet

__all__ = ["render_stylesheet"]

_INDENT = "  "


def _render_block(header: str, children: list[Node], depth: int) -> list[str]:
    pad = _INDENT * depth
    if not children:
        return [f"{pad}{header} {{}}"]
    lines = [f"{pad}{header} {{"]
    for child in children:
        lines.extend(_render_node(child, depth + 1))
    lines.append(f"{pad}}}")
    return lines


def _render_node(node: Node, depth: int) -> list[str]:
    pad = _INDENT * depth
    if isinstance(node, Declaration):
        important = " !important" if node.important else ""
        return [f"{pad}{node.prop}: {node.value}{important};"]
    if isinstance(node, Comment):
        return [f"{pad}/*{node.text}*/"]
    if isinstance(node, Rule):
        return _render_block(node.selector, node.nodes, depth)
    if isinstance(node, AtRule):
        header = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.nodes is None:
            return [f"{pad}{header};"]
        return _render_block(header, node.nodes, depth)
    raise TypeError(f"Cannot render node of type {type(node).__name__}")


def render_stylesheet(tree: Stylesheet) -> str:
    """Return CSS text for *tree*: two-space indents, one node per line."""
    lines: list[str] = []
    for node in tree.nodes:
        lines.extend(_render_node(node, 0))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"

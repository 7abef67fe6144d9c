"""Build a mutable stylesheet tree from CSS source using tinycss2.

Example:
    @media (max-width: 768px) {
        .card { color: red; color: blue !important; }
    }

becomes ``Stylesheet[AtRule(media)[Rule(.card)[Declaration, Declaration]]]``.
"""

from __future__ import annotations

import logging

import tinycss2

from cssdedupe.errors import ParseError
from cssdedupe.model.tree import AtRule, Comment, Declaration, Node, Rule, Stylesheet

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

# At-rules whose block holds rules rather than declarations.
_GROUPING_AT_RULES = frozenset({
    "media",
    "supports",
    "container",
    "layer",
    "document",
    "-moz-document",
    "scope",
    "starting-style",
})


def _is_grouping(lower_name: str) -> bool:
    return lower_name in _GROUPING_AT_RULES or lower_name.endswith("keyframes")


def _raise_for(error: tinycss2.ast.ParseError) -> None:
    raise ParseError(error.message, line=error.source_line, column=error.source_column)


def _check_missed_semicolon(decl: tinycss2.ast.Declaration) -> None:
    """Reject a value that swallowed the next declaration.

    ``color: red\\n  color: blue;`` parses as one declaration whose value
    contains ``color:`` at the start of a line.  ``progid:`` (old IE
    filters) is allowed there.
    """
    if decl.name.startswith("--"):
        return
    tokens = decl.value
    for i, token in enumerate(tokens):
        if token.type != "literal" or token.value != ":":
            continue
        j = i - 1
        while j >= 0 and tokens[j].type == "whitespace":
            j -= 1
        if (
            j >= 1
            and tokens[j].type == "ident"
            and tokens[j].lower_value != "progid"
            and tokens[j - 1].type == "whitespace"
            and "\n" in tokens[j - 1].value
        ):
            raise ParseError(
                "Missed semicolon",
                line=tokens[j].source_line,
                column=tokens[j].source_column,
            )


def _convert_declaration(decl: tinycss2.ast.Declaration) -> Declaration:
    _check_missed_semicolon(decl)
    return Declaration(
        prop=decl.name,
        value=tinycss2.serialize(decl.value).strip(),
        important=decl.important,
    )


def _parse_block(content: list) -> list[Node]:
    """Parse a rule body: declarations, comments and nested rules.

    An invalid declaration is dropped, as browsers do, and the rest of the
    block is kept.
    """
    nodes: list[Node] = []
    items = tinycss2.parse_blocks_contents(
        content, skip_comments=False, skip_whitespace=True
    )
    for item in items:
        if item.type == "declaration":
            nodes.append(_convert_declaration(item))
        elif item.type == "error":
            logger.warning(
                "Dropping invalid declaration at line %s, column %s: %s",
                item.source_line,
                item.source_column,
                item.message,
            )
        else:
            nodes.append(_convert_rule(item))
    return nodes


def _parse_rules(content: list) -> list[Node]:
    items = tinycss2.parse_rule_list(content, skip_comments=False, skip_whitespace=True)
    return [_convert_rule(item) for item in items]


def _convert_at_rule(rule: tinycss2.ast.AtRule) -> AtRule:
    params = tinycss2.serialize(rule.prelude).strip()
    if rule.content is None:
        return AtRule(name=rule.at_keyword, params=params)
    if _is_grouping(rule.lower_at_keyword):
        children = _parse_rules(rule.content)
    else:
        children = _parse_block(rule.content)
    return AtRule(name=rule.at_keyword, params=params, nodes=children)


def _convert_rule(item) -> Node:
    if item.type == "error":
        _raise_for(item)
    if item.type == "comment":
        return Comment(text=item.value)
    if item.type == "at-rule":
        return _convert_at_rule(item)
    if item.type == "qualified-rule":
        selector = tinycss2.serialize(item.prelude).strip()
        return Rule(selector=selector, nodes=_parse_block(item.content))
    raise ParseError(
        f"Unexpected {item.type} node",
        line=getattr(item, "source_line", None),
        column=getattr(item, "source_column", None),
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS *source* into a Stylesheet tree.

    Raises:
        ParseError: the source is not valid enough to build a tree from.
    """
    items = tinycss2.parse_stylesheet(source, skip_comments=False, skip_whitespace=True)
    return Stylesheet(nodes=[_convert_rule(item) for item in items])

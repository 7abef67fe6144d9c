"""Duplicate resolution within a single rule.

For each property name only the declaration a browser would apply
survives: the last ``!important`` one if there is any, otherwise the last
one.  Survivors keep their original relative order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssdedupe.model.tree import Container, Declaration
from cssdedupe.properties import is_vendor_prefixed, unprefixed

__all__ = ["resolve"]

logger = logging.getLogger(__name__)


@dataclass
class _Candidate:
    important: bool
    declaration: Declaration


def _is_well_formed(decl: Declaration) -> bool:
    return bool(decl.prop) and bool(decl.value and decl.value.strip())


def _drop(decl: Declaration, winner: Declaration) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        fallback = (
            f" (fallback for {unprefixed(decl.prop)})"
            if is_vendor_prefixed(decl.prop)
            else ""
        )
        logger.debug(
            "Removing %s: %s%s%s in favour of %r%s",
            decl.prop,
            decl.value,
            " !important" if decl.important else "",
            fallback,
            winner.value,
            " !important" if winner.important else "",
        )
    decl.remove()


def resolve(rule: Container) -> None:
    """Remove every declaration in *rule* that the cascade would override.

    Declarations with an empty property or value are left alone and do not
    take part in resolution.
    """
    candidates: dict[str, _Candidate] = {}

    for decl in rule.declarations():
        if not _is_well_formed(decl):
            continue

        key = decl.prop
        important = bool(decl.important)
        prev = candidates.get(key)

        if prev is not None:
            if prev.important and not important:
                # An earlier !important always beats a later normal value.
                _drop(decl, prev.declaration)
                continue
            _drop(prev.declaration, decl)

        candidates[key] = _Candidate(important=important, declaration=decl)

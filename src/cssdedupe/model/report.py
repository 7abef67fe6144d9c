"""Per-pass summary of what the duplicate-value transform changed."""

from __future__ import annotations

from dataclasses import dataclass, field

from cssdedupe.model.tree import Declaration
from cssdedupe.properties import is_vendor_prefixed


@dataclass
class DedupeReport:
    """Counters collected while walking one tree."""

    rules_visited: int = 0
    rules_skipped: int = 0
    rules_removed: int = 0
    rules_failed: int = 0
    removed_declarations: list[Declaration] = field(default_factory=list)

    @property
    def declarations_removed(self) -> int:
        return len(self.removed_declarations)

    @property
    def vendor_prefixed_removed(self) -> int:
        """How many of the removed declarations were vendor-prefixed."""
        return sum(1 for d in self.removed_declarations if is_vendor_prefixed(d.prop))

    @property
    def changed(self) -> bool:
        return bool(self.removed_declarations) or self.rules_removed > 0

    def __str__(self) -> str:
        return (
            f"visited={self.rules_visited} skipped={self.rules_skipped} "
            f"failed={self.rules_failed} rules_removed={self.rules_removed} "
            f"declarations_removed={self.declarations_removed}"
        )

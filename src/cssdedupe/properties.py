"""Property name classification."""

from __future__ import annotations

__all__ = ["VENDOR_PREFIXES", "is_vendor_prefixed", "unprefixed"]

VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "-o-")


def is_vendor_prefixed(prop: str) -> bool:
    """Return True if *prop* starts with a known vendor prefix.

    Prefixed properties are fallbacks for their standard counterpart but are
    still deduplicated under their own name; ``-webkit-transform`` and
    ``transform`` never collide.
    """
    return prop.startswith(VENDOR_PREFIXES)


def unprefixed(prop: str) -> str:
    """Strip a vendor prefix from *prop*, if it has one."""
    for prefix in VENDOR_PREFIXES:
        if prop.startswith(prefix):
            return prop[len(prefix):]
    return prop

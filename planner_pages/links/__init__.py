"""Cross-page link registry and the per-page resolver."""

from __future__ import annotations

from .registry import DestinationInfo, GroupInfo, LinkRegistry, matches_param
from .resolver import LinkResolver

__all__ = [
    "DestinationInfo",
    "GroupInfo",
    "LinkRegistry",
    "LinkResolver",
    "matches_param",
]

"""Destination index built between the declare and render passes.

Every declared page is registered once, in declaration order, with its final
1-based page number. Lookups never raise: a miss is ``None``.

Parameter matching
------------------
``resolve(type, **params)`` scans the type's pages in registration order and
returns the first whose stored parameters match every query parameter:

- values of the same type match when equal;
- a stored ``Week`` or ``Month`` matches an ``int`` query equal to its number;
- two real numbers (``bool`` excluded) match when numerically equal;
- any other pair does not match. Values are never compared as strings.
"""

from __future__ import annotations

import dataclasses as dc
import numbers
import types
import typing as typ

from planner_pages.calendar import Month, Week

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations.models import GroupDeclaration, PageDeclaration


@dc.dataclass(frozen=True, slots=True)
class DestinationInfo:
    """Where a declared page ended up."""

    destination_key: str
    page_number: int
    page_type: str
    params: cabc.Mapping[str, typ.Any]


@dc.dataclass(frozen=True, slots=True)
class GroupInfo:
    """Registered group: its name, cycling flag, and ordered keys."""

    name: str
    cycle: bool
    destinations: tuple[str, ...]


def matches_param(stored: object, query: object) -> bool:
    """Return whether a stored page parameter satisfies a query value.

    >>> matches_param(Week(2025, 12), 12)
    True
    >>> matches_param(12, "12")
    False
    """
    if type(stored) is type(query):
        return stored == query
    if isinstance(stored, Week | Month) and isinstance(query, int) and not isinstance(query, bool):
        return stored.number == query
    if _is_real(stored) and _is_real(query):
        return stored == query
    return False


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class LinkRegistry:
    """Map destination keys, page types, and group names to destinations."""

    def __init__(self) -> None:
        self._destinations: dict[str, DestinationInfo] = {}
        self._by_type: dict[str, list[DestinationInfo]] = {}
        self._groups: dict[str, GroupInfo] = {}

    def register(self, declaration: PageDeclaration, page_number: int) -> DestinationInfo:
        """Record ``declaration`` as living on ``page_number``."""
        info = DestinationInfo(
            destination_key=declaration.destination_key,
            page_number=page_number,
            page_type=declaration.type,
            params=types.MappingProxyType(dict(declaration.params)),
        )
        self._destinations[info.destination_key] = info
        self._by_type.setdefault(info.page_type, []).append(info)
        return info

    def register_group(self, group: GroupDeclaration) -> GroupInfo:
        info = GroupInfo(
            name=group.name, cycle=group.cycle, destinations=tuple(group.destination_keys)
        )
        self._groups[group.name] = info
        return info

    def resolve(self, dest_type: str, **params: typ.Any) -> DestinationInfo | None:
        """Find a destination by type (or key) and optional parameters.

        With no parameters ``dest_type`` is first tried as an exact
        destination key, so pages with explicit ids resolve by id.
        """
        if not params and dest_type in self._destinations:
            return self._destinations[dest_type]
        for info in self._by_type.get(dest_type, ()):
            if all(
                key in info.params and matches_param(info.params[key], value)
                for key, value in params.items()
            ):
                return info
        return None

    def resolve_key(self, key: str) -> DestinationInfo | None:
        return self._destinations.get(key)

    def exists(self, dest_type: str, **params: typ.Any) -> bool:
        return self.resolve(dest_type, **params) is not None

    def key_exists(self, key: str) -> bool:
        return key in self._destinations

    def keys(self) -> list[str]:
        return list(self._destinations)

    def destinations_for_type(self, page_type: str) -> list[DestinationInfo]:
        return list(self._by_type.get(page_type, ()))

    def group(self, name: str) -> GroupInfo | None:
        return self._groups.get(name)

    def group_names(self) -> list[str]:
        return list(self._groups)

    def next_in_cycle(self, group_name: str, current: str | None) -> str | None:
        """Return the key after ``current`` in a cycling group, wrapping.

        Unknown or non-cycling groups give ``None``; a ``current`` key that
        is not in the group gives the group's first key.
        """
        group = self._groups.get(group_name)
        if group is None or not group.cycle or not group.destinations:
            return None
        keys = group.destinations
        if current not in keys:
            return keys[0]
        return keys[(keys.index(current) + 1) % len(keys)]

    def page_numbers(self) -> dict[str, int]:
        """Return destination key → page number for every registered page."""
        return {key: info.page_number for key, info in self._destinations.items()}

    def __len__(self) -> int:
        return len(self._destinations)

    def __iter__(self) -> cabc.Iterator[DestinationInfo]:
        return iter(self._destinations.values())


__all__ = ["DestinationInfo", "GroupInfo", "LinkRegistry", "matches_param"]

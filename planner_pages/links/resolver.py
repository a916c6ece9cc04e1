"""Page-relative view of the link registry handed to each page builder."""

from __future__ import annotations

import typing as typ

from planner_pages import _constants

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.links.registry import LinkRegistry

WEEKLY_PAGE_TYPE = "weekly"


class LinkResolver:
    """Resolve link targets relative to the page being rendered.

    Parameters
    ----------
    registry : LinkRegistry
        The frozen registry for the whole document.
    current_type : str or None
        Type of the page being rendered.
    current_params : Mapping[str, Any], optional
        Identifying parameters of the page, typically ``week_num``, ``month``
        and ``year``.
    current_key : str, optional
        Destination key of the page being rendered. When omitted it is
        looked up from ``current_type`` and ``current_params``.
    total_weeks : int, optional
        Number of weeks in the planner year; bounds :meth:`next_week`.
    """

    def __init__(
        self,
        registry: LinkRegistry,
        current_type: str | None = None,
        current_params: cabc.Mapping[str, typ.Any] | None = None,
        *,
        current_key: str | None = None,
        total_weeks: int | None = None,
    ) -> None:
        self.registry = registry
        self.current_type = current_type
        self.current_params = dict(current_params or {})
        self._current_key = current_key
        self.total_weeks = total_weeks

    def resolve(self, dest_type: str, **params: typ.Any) -> str | None:
        """Return the destination key for a type and parameters, if any."""
        info = self.registry.resolve(dest_type, **params)
        return info.destination_key if info else None

    def resolve_key(self, key: str) -> str | None:
        info = self.registry.resolve_key(key)
        return info.destination_key if info else None

    def page_number(self, key: str) -> int | None:
        info = self.registry.resolve_key(key)
        return info.page_number if info else None

    def exists(self, dest_type: str, **params: typ.Any) -> bool:
        return self.registry.exists(dest_type, **params)

    def prev_week(self, week_num: int | None = None) -> str | None:
        """Return the previous weekly page, or ``None`` in week 1."""
        num = week_num if week_num is not None else self.current_params.get("week_num")
        if num is None or num <= 1:
            return None
        return self.resolve(WEEKLY_PAGE_TYPE, week=num - 1)

    def next_week(
        self, week_num: int | None = None, total_weeks: int | None = None
    ) -> str | None:
        """Return the next weekly page, or ``None`` in the final week."""
        num = week_num if week_num is not None else self.current_params.get("week_num")
        total = (
            total_weeks
            or self.total_weeks
            or self.current_params.get("total_weeks")
            or _constants.DEFAULT_TOTAL_WEEKS
        )
        if num is None or num >= total:
            return None
        return self.resolve(WEEKLY_PAGE_TYPE, week=num + 1)

    def current_destination(self) -> str | None:
        """Return the destination key of the page being rendered."""
        if self._current_key is not None:
            return self._current_key
        if self.current_type is None:
            return None
        return self.resolve(self.current_type, **self.current_params)

    def next_in_group(self, group_name: str) -> str | None:
        return self.registry.next_in_cycle(group_name, self.current_destination())

    def group_destinations(self, group_name: str) -> list[str]:
        group = self.registry.group(group_name)
        return list(group.destinations) if group else []

    def in_group(self, group_name: str) -> bool:
        group = self.registry.group(group_name)
        if group is None:
            return False
        return self.current_destination() in group.destinations


__all__ = ["WEEKLY_PAGE_TYPE", "LinkResolver"]

"""Value coercion helpers shared by the planner configuration loader."""

from __future__ import annotations

import re
import typing as typ

from planner_pages import _constants
from planner_pages.declarations.models import DOCUMENT_METADATA_FIELDS

from .models import CollectionConfig, PlannerConfigError

MIN_YEAR = 1900
MAX_YEAR = 2200
_COLLECTION_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_year(value: object) -> int:
    match value:
        case bool():
            pass
        case int() if MIN_YEAR <= value <= MAX_YEAR:
            return value
        case str() if value.strip().isdigit():
            return _coerce_year(int(value.strip()))
    msg = f"'year' must be a year between {MIN_YEAR} and {MAX_YEAR}, got {value!r}."
    raise PlannerConfigError(msg)


def _coerce_spacing(value: object) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool) and value > 0:
        return float(value)
    msg = f"'dot_spacing' must be a positive number of points, got {value!r}."
    raise PlannerConfigError(msg)


def _coerce_page_size(value: object) -> str:
    name = str(value).strip().lower()
    if name not in _constants.PAGE_SIZES:
        known = ", ".join(sorted(_constants.PAGE_SIZES))
        msg = f"Unknown page size '{value}'. Known sizes: {known}"
        raise PlannerConfigError(msg)
    return name


def _build_metadata(raw: object) -> dict[str, typ.Any]:
    """Validate document metadata overrides."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = "'metadata' must be a mapping."
        raise PlannerConfigError(msg)
    unknown = sorted(set(raw) - DOCUMENT_METADATA_FIELDS)
    if unknown:
        msg = f"Unknown metadata fields: {', '.join(map(str, unknown))}"
        raise PlannerConfigError(msg)
    return dict(raw)


def _build_collections(raw: object) -> list[CollectionConfig]:
    """Parse the ``collections`` list, rejecting malformed or duplicate ids."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        msg = "'collections' must be a list."
        raise PlannerConfigError(msg)
    collections: list[CollectionConfig] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            msg = f"Collection #{index + 1} must be a mapping."
            raise PlannerConfigError(msg)
        collection_id = _optional_str(entry.get("id"))
        title = _optional_str(entry.get("title"))
        if collection_id is None or title is None:
            msg = f"Collection #{index + 1} requires both 'id' and 'title'."
            raise PlannerConfigError(msg)
        if not _COLLECTION_ID.match(collection_id):
            msg = f"Collection id '{collection_id}' may only contain letters, digits, '-' and '_'."
            raise PlannerConfigError(msg)
        if collection_id in seen:
            msg = f"Duplicate collection id '{collection_id}'."
            raise PlannerConfigError(msg)
        seen.add(collection_id)
        collections.append(
            CollectionConfig(
                id=collection_id,
                title=title,
                subtitle=_optional_str(entry.get("subtitle")),
            )
        )
    return collections


__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "_build_collections",
    "_build_metadata",
    "_coerce_page_size",
    "_coerce_spacing",
    "_coerce_year",
    "_optional_str",
]

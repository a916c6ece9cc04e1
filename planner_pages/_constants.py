"""Common literal values used across planner_pages.

Page sizes are in PostScript points; the dot spacing matches a 5 mm grid.
The manifest template names the JSON file written next to a generated PDF.

Examples
--------
>>> from planner_pages import _constants
>>> _constants.BUILD_META_TEMPLATE.format(recipe="standard_planner")
'.planner-standard_planner-meta.json'
>>> _constants.PAGE_SIZES["letter"]
(612.0, 792.0)
"""

DOT_SPACING = 14.17
PAGE_SIZES: dict[str, tuple[float, float]] = {
    "letter": (612.0, 792.0),
    "a4": (595.28, 841.89),
}
DEFAULT_PAGE_SIZE = "letter"
DEFAULT_TOTAL_WEEKS = 53
BUILD_META_TEMPLATE = ".planner-{recipe}-meta.json"

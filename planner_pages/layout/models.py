"""Value types shared by the layout tree: bounds, constraints, and direction."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from planner_pages.errors import ConfigurationError

Axis = typ.Literal["width", "height"]
Number = int | float


class Direction(enum.Enum):
    """Main-axis direction of a container."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @property
    def main_axis(self) -> Axis:
        """Return the dimension children are distributed along."""
        return "height" if self is Direction.VERTICAL else "width"

    @property
    def cross_axis(self) -> Axis:
        """Return the dimension every child inherits in full."""
        return "width" if self is Direction.VERTICAL else "height"

    @classmethod
    def coerce(cls, value: Direction | str) -> Direction:
        """Accept either a member or its string value."""
        if isinstance(value, Direction):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown layout direction '{value}'; use 'vertical' or 'horizontal'."
            raise ConfigurationError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class Bounds:
    """Rectangle in grid units with a top-left origin.

    Attributes
    ----------
    col : Number
        Left edge, in grid columns from the page origin.
    row : Number
        Top edge, in grid rows from the page origin.
    width : Number
        Horizontal extent in grid units.
    height : Number
        Vertical extent in grid units.
    """

    col: Number
    row: Number
    width: Number
    height: Number

    @property
    def right(self) -> Number:
        return self.col + self.width

    @property
    def bottom(self) -> Number:
        return self.row + self.height

    def size(self, axis: Axis) -> Number:
        """Return the extent along ``axis``."""
        return self.width if axis == "width" else self.height

    def start(self, axis: Axis) -> Number:
        """Return the leading edge along ``axis``."""
        return self.col if axis == "width" else self.row

    def as_dict(self) -> dict[str, Number]:
        return dc.asdict(self)


@dc.dataclass(frozen=True, slots=True)
class Constraints:
    """Size constraints for a layout node, all in grid units.

    Every field is optional. A constraint is present when it is not ``None``;
    zero is a valid explicit value.
    """

    width: Number | None = None
    height: Number | None = None
    flex: Number | None = None
    min_width: Number | None = None
    min_height: Number | None = None
    max_width: Number | None = None
    max_height: Number | None = None

    def fixed(self, axis: Axis) -> Number | None:
        """Return the fixed size along ``axis`` or ``None``."""
        return self.width if axis == "width" else self.height

    def clamp(self, value: Number, axis: Axis) -> Number:
        """Apply the minimum, then the maximum, for ``axis``.

        When the minimum exceeds the maximum, the maximum wins because it is
        applied last.
        """
        lower = self.min_width if axis == "width" else self.min_height
        upper = self.max_width if axis == "width" else self.max_height
        if lower is not None:
            value = max(lower, value)
        if upper is not None:
            value = min(upper, value)
        return value


__all__ = ["Axis", "Bounds", "Constraints", "Direction", "Number"]

"""Animated cursor corners and where the cursor should be drawn."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from gridfront.animation import F32_EPSILON, ease_out_expo, ease_point, lerp
from gridfront.geometry import Dimensions, Point

DEFAULT_CELL_PERCENTAGE = 1.0 / 8.0

STANDARD_CORNERS: tuple[tuple[float, float], ...] = (
    (-0.5, -0.5),
    (0.5, -0.5),
    (0.5, 0.5),
    (-0.5, 0.5),
)


class CursorShape(enum.Enum):
    BLOCK = "block"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Corner:
    """One of the four corners of the cursor, animated independently."""

    start_position: Point = field(default_factory=Point)
    current_position: Point = field(default_factory=Point)
    relative_position: Point = field(default_factory=Point)
    previous_destination: Point = field(
        default_factory=lambda: Point(-1000.0, -1000.0)
    )
    length_multiplier: float = 1.0
    t: float = 0.0

    def update(
        self,
        settings: Any,
        font_dimensions: Point,
        destination: Point,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move the corner towards ``destination``; return whether it moved."""
        if destination != self.previous_destination:
            self.t = 0.0
            self.start_position = self.current_position
            self.previous_destination = destination
            if settings.distance_length_adjust:
                distance = (destination - self.current_position).length()
                self.length_multiplier = (
                    max(math.log10(distance), 0.0) if distance > 0.0 else 0.0
                )
            else:
                self.length_multiplier = 1.0

        if abs(self.t - 1.0) < F32_EPSILON:
            return False

        relative_scaled_position = Point(
            self.relative_position.x * font_dimensions.x,
            self.relative_position.y * font_dimensions.y,
        )
        corner_destination = destination + relative_scaled_position

        if immediate_movement:
            self.t = 1.0
            self.current_position = corner_destination
            return True

        # Corners leading the motion move faster than trailing ones.
        travel_direction = (destination - self.current_position).normalized()
        corner_direction = self.relative_position.normalized()
        direction_alignment = travel_direction.dot(corner_direction)

        trail = min(max(1.0 - settings.trail_size, 0.0), 1.0)
        corner_dt = dt * lerp(1.0, trail, -direction_alignment)
        duration = settings.animation_length * self.length_multiplier
        if duration != 0.0:
            step = corner_dt / duration
        else:
            step = math.inf if corner_dt >= 0.0 else -math.inf
        self.t = min(self.t + step, 1.0)

        self.current_position = ease_point(
            ease_out_expo, self.start_position, corner_destination, self.t
        )
        return True


def _relative_position(
    x: float, y: float, shape: CursorShape, cell_percentage: float
) -> Point:
    if shape is CursorShape.VERTICAL:
        # Shift the right edge over to the bar width.
        return Point((x + 0.5) * cell_percentage - 0.5, y)
    if shape is CursorShape.HORIZONTAL:
        # Same as the vertical bar, flipped so the bar sits at the bottom of the cell.
        return Point(x, -((-y + 0.5) * cell_percentage - 0.5))
    return Point(x, y)


def corners_for_shape(
    corners: Iterable[Corner], shape: CursorShape, cell_percentage: float
) -> list[Corner]:
    """Return the corners reshaped for ``shape``, restarting their animation."""
    return [
        replace(
            corner,
            relative_position=_relative_position(x, y, shape, cell_percentage),
            t=0.0,
            start_position=corner.current_position,
        )
        for corner, (x, y) in zip(corners, STANDARD_CORNERS)
    ]


def cursor_destination(
    grid_position: tuple[int, int],
    font_dimensions: Dimensions,
    window: Any | None,
) -> Point:
    """Pixel position of the cursor's top-left corner.

    ``window`` is the window holding the cursor (with ``grid_current_position``,
    ``current_scroll``, ``top_line`` and ``grid_size``), or None when unknown.
    """
    cursor_grid_x, cursor_grid_y = grid_position
    font_width, font_height = font_dimensions.width, font_dimensions.height

    if window is None:
        return Point(
            float(cursor_grid_x * font_width), float(cursor_grid_y * font_height)
        )

    window_position = window.grid_current_position
    grid_x = cursor_grid_x + window_position.x
    grid_y = (
        cursor_grid_y
        + window_position.y
        - (window.current_scroll - window.top_line)
    )
    # Scrolling only moves content vertically, so only clamp the vertical position.
    grid_y = min(
        max(grid_y, window_position.y),
        window_position.y + window.grid_size.height - 1.0,
    )
    return Point(grid_x * font_width, grid_y * font_height)
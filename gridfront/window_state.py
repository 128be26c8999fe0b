"""Position, size, visibility and scroll animation of one editor window."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from gridfront.animation import F32_EPSILON, ease, ease_out_expo, ease_point
from gridfront.config import RendererSettings
from gridfront.geometry import Dimensions, Point, Rect

MAX_SNAPSHOTS = 5

# A t outside the 0..1 range means the animation is stopped.
_STOPPED = 2.0


@dataclass(frozen=True)
class WindowDrawDetails:
    """Where a window was drawn, in pixels, and how it stacks."""

    id: int
    region: Rect
    floating_order: int | None = None


@dataclass
class WindowState:
    """Animated placement of a grid window.

    Scroll snapshots are recorded by the top line they showed; at most
    ``MAX_SNAPSHOTS`` are kept, oldest dropped first.
    """

    id: int
    grid_position: Point
    grid_size: Dimensions
    hidden: bool = False
    floating_order: int | None = None
    top_line: int = 0
    current_scroll: float = 0.0
    grid_current_position: Point = field(init=False)
    _grid_start_position: Point = field(init=False, repr=False)
    _grid_destination: Point = field(init=False, repr=False)
    _position_t: float = field(default=_STOPPED, init=False, repr=False)
    _start_scroll: float = field(default=0.0, init=False, repr=False)
    _scroll_destination: float = field(default=0.0, init=False, repr=False)
    _scroll_t: float = field(default=_STOPPED, init=False, repr=False)
    _snapshots: deque[int] = field(
        default_factory=lambda: deque(maxlen=MAX_SNAPSHOTS), init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.grid_current_position = self.grid_position
        self._grid_start_position = self.grid_position
        self._grid_destination = self.grid_position

    @property
    def grid_destination(self) -> Point:
        return self._grid_destination

    @property
    def scroll_destination(self) -> float:
        return self._scroll_destination

    @property
    def snapshots(self) -> tuple[int, ...]:
        """Top lines of the retained scroll snapshots, oldest first."""
        return tuple(self._snapshots)

    def pixel_region(self, font_dimensions: Dimensions) -> Rect:
        x = self.grid_current_position.x * font_dimensions.width
        y = self.grid_current_position.y * font_dimensions.height
        width, height = (self.grid_size * font_dimensions).to_tuple()
        return Rect.from_xywh(x, y, float(width), float(height))

    def update(self, settings: RendererSettings, dt: float) -> bool:
        """Advance position and scroll animations; return whether still animating."""
        animating = False

        if 1.0 - self._position_t < F32_EPSILON:
            self._position_t = _STOPPED
        else:
            animating = True
            self._position_t = min(
                self._position_t + dt / settings.position_animation_length, 1.0
            )
        self.grid_current_position = ease_point(
            ease_out_expo,
            self._grid_start_position,
            self._grid_destination,
            self._position_t,
        )

        if 1.0 - self._scroll_t < F32_EPSILON:
            self._scroll_t = _STOPPED
            self._snapshots.clear()
        else:
            animating = True
            self._scroll_t = min(
                self._scroll_t + dt / settings.scroll_animation_length, 1.0
            )
        self.current_scroll = ease(
            ease_out_expo, self._start_scroll, self._scroll_destination, self._scroll_t
        )

        return animating

    def set_position(
        self,
        grid_position: tuple[float, float],
        grid_size: tuple[int, int],
        floating_order: int | None = None,
    ) -> None:
        """Move and resize the window, animating the move when it has a prior place."""
        grid_left, grid_top = grid_position
        new_destination = Point(float(max(grid_left, 0.0)), float(max(grid_top, 0.0)))
        new_grid_size = Dimensions.from_pair(grid_size)

        if self._grid_destination != new_destination:
            start = self._grid_start_position
            if abs(start.x) > F32_EPSILON or abs(start.y) > F32_EPSILON:
                self._position_t = 0.0
                self._grid_start_position = self.grid_current_position
            else:
                # Windows appearing from the origin jump straight into place.
                self._position_t = _STOPPED
                self._grid_start_position = new_destination
            self._grid_destination = new_destination

        if self.grid_size != new_grid_size:
            self.grid_size = new_grid_size

        self.floating_order = floating_order

        if self.hidden:
            self.hidden = False
            self._position_t = _STOPPED
            self._grid_start_position = new_destination
            self._grid_destination = new_destination

    def show(self) -> None:
        if self.hidden:
            self.hidden = False
            self._position_t = _STOPPED
            self._grid_start_position = self._grid_destination

    def hide(self) -> None:
        self.hidden = True

    def clear(self) -> None:
        """Drop the window contents, including any scroll snapshots."""
        self._snapshots.clear()

    def set_viewport(self, top_line: int) -> None:
        """Scroll to a new top line, keeping a snapshot of the old view."""
        top_line = int(top_line)
        if self.top_line == top_line:
            return
        self._snapshots.append(self.top_line)
        self.top_line = top_line
        self._start_scroll = self.current_scroll
        self._scroll_destination = float(top_line)
        self._scroll_t = 0.0

    def draw_details(self, font_dimensions: Dimensions) -> WindowDrawDetails:
        return WindowDrawDetails(
            id=self.id,
            region=self.pixel_region(font_dimensions),
            floating_order=self.floating_order,
        )
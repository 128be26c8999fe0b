"""Draw ordering of editor windows."""

from __future__ import annotations

from typing import Any, Iterable


def floating_sort_key(window: Any) -> tuple[int, float, float]:
    """Order floating windows by floating order, then x, then y grid position."""
    if window.floating_order is None:
        raise ValueError(f"window {window.id} is not floating")
    position = window.grid_current_position
    return (window.floating_order, position.x, position.y)


def draw_order(windows: Iterable[Any]) -> list[Any]:
    """Return the visible windows in the order they are drawn.

    Root windows come first, sorted by id; floating windows follow, sorted by
    :func:`floating_sort_key`. Hidden windows are left out.
    """
    visible = [window for window in windows if not window.hidden]
    root_windows = sorted(
        (window for window in visible if window.floating_order is None),
        key=lambda window: window.id,
    )
    floating_windows = sorted(
        (window for window in visible if window.floating_order is not None),
        key=floating_sort_key,
    )
    return root_windows + floating_windows
"""Loading, saving and parsing of the initial window size in grid cells."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from gridfront.geometry import Dimensions

logger = logging.getLogger(__name__)

if os.name == "nt":
    SETTINGS_PATH = "AppData/Local/nvim-data/gridfront-settings.json"
else:
    SETTINGS_PATH = ".local/share/nvim/gridfront-settings.json"

DEFAULT_WINDOW_GEOMETRY = Dimensions(width=100, height=50)

_U64_MAX = 2**64 - 1
_DIMENSION = re.compile(r"\+?[0-9]+")


class GeometryError(ValueError):
    """Raised when a window geometry cannot be loaded or parsed."""


def settings_path(home: Path | str | None = None) -> Path:
    base = Path(home) if home is not None else Path.home()
    return base / SETTINGS_PATH


def try_to_load_last_window_size(path: Path | str | None = None) -> Dimensions:
    """Read the saved window size; zero sizes fall back to the default."""
    target = Path(path) if path is not None else settings_path()
    try:
        text = target.read_text()
        loaded = Dimensions.from_json(text)
    except (OSError, ValueError) as error:
        raise GeometryError(str(error)) from error
    logger.debug("Loaded Window Size: %r", loaded)

    if loaded.width == 0 or loaded.height == 0:
        logger.warning("Invalid Saved Window Size. Reverting to default")
        return DEFAULT_WINDOW_GEOMETRY
    return loaded


def maybe_save_window_size(
    grid_size: Dimensions | None,
    remember_window_size: bool,
    path: Path | str | None = None,
) -> None:
    """Write the grid size if remembering is on, otherwise the default size."""
    if remember_window_size and grid_size is not None:
        saved = grid_size
    else:
        saved = DEFAULT_WINDOW_GEOMETRY

    target = Path(path) if path is not None else settings_path()
    text = saved.to_json()
    logger.debug("Saved Window Size: %s", text)
    target.write_text(text)


def _parse_dimension(part: str, invalid_parse_err: str) -> int:
    if not _DIMENSION.fullmatch(part):
        raise GeometryError(invalid_parse_err)
    value = int(part)
    if value > _U64_MAX:
        raise GeometryError(invalid_parse_err)
    if value == 0:
        raise GeometryError(
            "Invalid geometry: Window dimensions should be greater than 0."
        )
    return value


def parse_window_geometry(
    geometry: str | None, path: Path | str | None = None
) -> Dimensions:
    """Parse a "<width>x<height>" geometry, or use the saved size when none is given."""
    if geometry is None:
        try:
            return try_to_load_last_window_size(path)
        except GeometryError:
            return DEFAULT_WINDOW_GEOMETRY

    invalid_parse_err = (
        f"Invalid geometry: {geometry}\nValid format: <width>x<height>"
    )
    dimensions = [
        _parse_dimension(part, invalid_parse_err) for part in geometry.split("x")
    ]
    if len(dimensions) != 2:
        raise GeometryError(invalid_parse_err)
    width, height = dimensions
    return Dimensions(width=width, height=height)
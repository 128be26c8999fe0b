"""Grid dimensions and simple two-dimensional geometry."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass

_U64_MAX = 2**64 - 1


def _to_u64(value: float | int) -> int:
    """Convert a number to an unsigned 64-bit integer, truncating and saturating."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return 0 if value < 0 else _U64_MAX
    return min(max(int(value), 0), _U64_MAX)


@dataclass(frozen=True)
class Dimensions:
    """A width and height in whole units, such as grid cells or pixels."""

    width: int
    height: int

    @classmethod
    def from_pair(cls, pair: tuple[float | int, float | int]) -> Dimensions:
        """Build dimensions from a (width, height) pair, truncating fractions."""
        width, height = pair
        return cls(_to_u64(width), _to_u64(height))

    def to_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def to_json(self) -> str:
        return json.dumps(
            {"width": self.width, "height": self.height}, separators=(",", ":")
        )

    @classmethod
    def from_json(cls, text: str) -> Dimensions:
        """Parse dimensions from a JSON object; raises ValueError when malformed."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object with width and height")
        fields = []
        for name in ("width", "height"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if (
                not isinstance(value, int)
                or isinstance(value, bool)
                or not 0 <= value <= _U64_MAX
            ):
                raise ValueError(f"invalid value for `{name}`: {value!r}")
            fields.append(value)
        return cls(*fields)

    def __mul__(self, other: object) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(self.width * other.width, self.height * other.height)

    def __truediv__(self, other: object) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(self.width // other.width, self.height // other.height)

    def scale(self, position: tuple[int, int]) -> tuple[int, int]:
        """Scale an (x, y) grid position by these dimensions."""
        x, y = position
        return (x * self.width, y * self.height)


@dataclass(frozen=True)
class Point:
    """A point or vector in floating point space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Point:
        """Return the unit vector in this direction, or the zero vector if it has none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_wh(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.bottom - self.top

    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    def offset(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside, counting the left and top edges only."""
        return self.left <= x < self.right and self.top <= y < self.bottom
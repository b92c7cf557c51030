"""Plane geometry used by the game: points, sizes, rectangles and alignment."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterator


class Align(enum.IntFlag):
    """Anchor flags; combining opposite sides cancels out to the middle."""

    LEFT = 0x1
    RIGHT = 0x2
    TOP = 0x4
    BOTTOM = 0x8
    CENTER = LEFT | RIGHT | TOP | BOTTOM


@dataclass
class Point:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, value: float) -> Point:
        return Point(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Point:
        return Point(self.x / value, self.y / value)

    def is_default(self) -> bool:
        """Whether both coordinates are zero."""
        return self.x == 0 and self.y == 0

    def move_x(self, offset: float) -> None:
        self.x += offset

    def move_y(self, offset: float) -> None:
        self.y += offset

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def normal(self) -> Point:
        """Unit vector perpendicular to this one (rotated a quarter turn)."""
        length = math.hypot(self.x, self.y)
        if length == 0:
            raise ValueError("cannot take the normal of a zero vector")
        return Point(-self.y / length, self.x / length)

    def overlap(self, other: Point) -> bool:
        """Treat both points as (min, max) intervals and test whether they meet."""
        return self.x <= other.y and self.y >= other.x

    def overlap_length(self, other: Point) -> float:
        """Length of the common part of two (min, max) intervals, or 0."""
        if not self.overlap(other):
            return 0.0
        return min(self.y, other.y) - max(self.x, other.x)


@dataclass
class Size:
    """Width and height."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    pos: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    def width(self) -> float:
        return self.size.width

    def height(self) -> float:
        return self.size.height

    def top_left(self) -> Point:
        return Point(self.pos.x, self.pos.y)

    def top_right(self) -> Point:
        return Point(self.pos.x + self.width(), self.pos.y)

    def bottom_left(self) -> Point:
        return Point(self.pos.x, self.pos.y + self.height())

    def bottom_right(self) -> Point:
        return Point(self.pos.x + self.width(), self.pos.y + self.height())

    def center(self) -> Point:
        return Point(self.pos.x + self.width() / 2, self.pos.y + self.height() / 2)

    def point_by(self, origin: Align) -> Point:
        """The point of the rectangle named by the alignment flags."""
        origin = Align(origin)
        result = self.center()
        half_width = self.width() / 2
        half_height = self.height() / 2
        if Align.LEFT in origin:
            result.move_x(-half_width)
        if Align.RIGHT in origin:
            result.move_x(half_width)
        if Align.TOP in origin:
            result.move_y(-half_height)
        if Align.BOTTOM in origin:
            result.move_y(half_height)
        return result

    def union(self, other: Rect) -> Rect:
        """Component-wise maximum of position and size of both rectangles."""
        return Rect(
            Point(max(self.pos.x, other.pos.x), max(self.pos.y, other.pos.y)),
            Size(max(self.size.width, other.size.width), max(self.size.height, other.size.height)),
        )

    def __or__(self, other: Rect) -> Rect:
        return self.union(other)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)
"""A transformable rectangle shape with position, origin, rotation and scale."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from wanderer.geometry import Point, Rect, Size


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform: x' = a*x + b*y + tx, y' = c*x + d*y + ty."""

    a: float = 1.0
    b: float = 0.0
    tx: float = 0.0
    c: float = 0.0
    d: float = 1.0
    ty: float = 0.0

    def transform_point(self, point: Point) -> Point:
        """Apply the transform to a point."""
        return Point(
            self.a * point.x + self.b * point.y + self.tx,
            self.c * point.x + self.d * point.y + self.ty,
        )


@dataclass
class RectangleShape:
    """A rectangle of a given size placed in the world by an affine transform.

    The origin is the local point that sits at ``position``; rotation is in
    degrees, clockwise in a y-down coordinate system, and kept in [0, 360).
    """

    size: Size = field(default_factory=Size)
    position: Point = field(default_factory=Point)
    origin: Point = field(default_factory=Point)
    rotation: float = 0.0
    scale: Point = field(default_factory=lambda: Point(1.0, 1.0))
    fill_color: tuple[int, int, int, int] = (255, 255, 255, 255)

    def __post_init__(self) -> None:
        self.rotation %= 360.0

    def point_count(self) -> int:
        return 4

    def point(self, index: int) -> Point:
        """Local corner by index, clockwise from the top-left."""
        corners = (
            Point(0.0, 0.0),
            Point(self.size.width, 0.0),
            Point(self.size.width, self.size.height),
            Point(0.0, self.size.height),
        )
        if not 0 <= index < len(corners):
            raise IndexError(f"rectangle has no point {index}")
        return corners[index]

    def transform(self) -> Transform:
        """The local-to-world transform built from origin, scale, rotation and position."""
        angle = -math.radians(self.rotation)
        cosine = math.cos(angle)
        sine = math.sin(angle)
        sxc = self.scale.x * cosine
        syc = self.scale.y * cosine
        sxs = self.scale.x * sine
        sys_ = self.scale.y * sine
        tx = -self.origin.x * sxc - self.origin.y * sys_ + self.position.x
        ty = self.origin.x * sxs - self.origin.y * syc + self.position.y
        return Transform(sxc, sys_, tx, -sxs, syc, ty)

    def local_bounds(self) -> Rect:
        return Rect(Point(0.0, 0.0), Size(self.size.width, self.size.height))

    def global_bounds(self) -> Rect:
        """Axis-aligned bounding box of the transformed rectangle."""
        transform = self.transform()
        corners = [transform.transform_point(self.point(i)) for i in range(self.point_count())]
        xs = [corner.x for corner in corners]
        ys = [corner.y for corner in corners]
        left, top = min(xs), min(ys)
        return Rect(Point(left, top), Size(max(xs) - left, max(ys) - top))

    def geometric_center(self) -> Point:
        return Point(self.size.width / 2, self.size.height / 2)

    def move(self, offset: Point) -> None:
        self.position = self.position + offset

    def rotate(self, degrees: float) -> None:
        self.rotation = (self.rotation + degrees) % 360.0

    def scale_by(self, factor: Point) -> None:
        self.scale = Point(self.scale.x * factor.x, self.scale.y * factor.y)
"""Plain and collidable square obstacles placed in the scene."""

from __future__ import annotations

from typing import Any

from wanderer.events import EventHandler
from wanderer.geometry import Align, Point, Rect, Size
from wanderer.items import CollisionItem, Item
from wanderer.shapes import RectangleShape

YELLOW = (255, 255, 0, 255)
RED = (255, 0, 0, 255)

_SIDE = 50.0
_COLLISION_ROTATION = 45.0


def _world_center(shape: RectangleShape) -> Point:
    return shape.transform().transform_point(shape.geometric_center())


class RectItem(Item):
    """A yellow square that is only drawn; nothing collides with it."""

    def __init__(self, parent: EventHandler | None = None) -> None:
        super().__init__(parent)
        self.shape = RectangleShape(size=Size(_SIDE, _SIDE), fill_color=YELLOW)

    def draw(self, target: Any) -> None:
        target.draw(self.shape)

    def global_rect(self) -> Rect:
        return self.shape.global_bounds()

    def local_rect(self) -> Rect:
        return self.shape.local_bounds()

    def center(self) -> Point:
        return _world_center(self.shape)

    def set_pos(self, position: Point) -> None:
        self.shape.position = Point(position.x, position.y)

    def set_origin(self, origin: Align) -> None:
        self.shape.origin = self.local_rect().point_by(origin)


class CollisionRect(CollisionItem):
    """A red square turned by 45 degrees that blocks collision handlers."""

    def __init__(self, parent: EventHandler | None = None) -> None:
        super().__init__(parent)
        self.shape = RectangleShape(size=Size(_SIDE, _SIDE), fill_color=RED)
        self.shape.rotate(_COLLISION_ROTATION)

    def draw(self, target: Any) -> None:
        target.draw(self.shape)

    def global_rect(self) -> Rect:
        return self.shape.global_bounds()

    def local_rect(self) -> Rect:
        return self.shape.local_bounds()

    def collision_rect(self) -> Rect:
        return self.global_rect()

    def center(self) -> Point:
        return _world_center(self.shape)

    def collision_center(self) -> Point:
        return self.center()

    def vertices(self) -> list[Point]:
        transform = self.shape.transform()
        return [
            transform.transform_point(self.shape.point(index))
            for index in range(self.shape.point_count())
        ]

    def set_pos(self, position: Point) -> None:
        self.shape.position = Point(position.x, position.y)

    def set_origin(self, origin: Align) -> None:
        self.shape.origin = self.local_rect().point_by(origin)
"""Base classes for things that live in a scene or a menu."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

from wanderer.events import EventHandler
from wanderer.geometry import Align, Point, Rect


class Drawable(ABC):
    """Something that can be drawn and advanced in time."""

    def __init__(self) -> None:
        super().__init__()
        self.elapsed = 0.0

    def update(self, deltatime: float) -> None:
        """Advance the time this drawable has been running by ``deltatime`` seconds."""
        self.elapsed += deltatime

    @abstractmethod
    def draw(self, target: Any) -> None:
        """Draw onto the given render target."""


class Item(EventHandler, Drawable):
    """A placeable, drawable object that also receives events."""

    def __init__(self, parent: EventHandler | None = None) -> None:
        super().__init__()
        if parent is not None:
            parent.add_event_handler(self)

    @abstractmethod
    def global_rect(self) -> Rect:
        """Bounding box in world coordinates."""

    @abstractmethod
    def local_rect(self) -> Rect:
        """Bounding box in the item's own coordinates."""

    @abstractmethod
    def center(self) -> Point:
        """Center in world coordinates."""

    @abstractmethod
    def set_pos(self, position: Point) -> None:
        """Place the item's origin at ``position``."""

    @abstractmethod
    def set_origin(self, origin: Align) -> None:
        """Choose which point of the item is its origin."""

    def accept(self, visitor: Any) -> None:
        visitor.visit_item(self)


class CollisionItem(Item):
    """An item with a convex collision polygon."""

    @abstractmethod
    def collision_rect(self) -> Rect:
        """Bounding box of the collision polygon."""

    @abstractmethod
    def vertices(self) -> list[Point]:
        """Corners of the collision polygon in world coordinates, in order."""

    @abstractmethod
    def collision_center(self) -> Point:
        """Center of the collision polygon."""

    def projection_on(self, axis: Point) -> Point:
        """Project the polygon on ``axis``; returns the interval as Point(min, max)."""
        projections = [vertex.dot(axis) for vertex in self.vertices()]
        return Point(min(projections, default=math.inf), max(projections, default=-math.inf))

    def axes(self) -> list[Point]:
        """Unit normals of every edge of the polygon."""
        vertices = self.vertices()
        return [(end - start).normal() for start, end in zip(vertices, vertices[1:] + vertices[:1])]

    def accept(self, visitor: Any) -> None:
        visitor.visit_collision_item(self)


class CollisionHandler(CollisionItem):
    """A collision item that reacts to touching other collision items."""

    @abstractmethod
    def handle_collision(self, item: CollisionItem) -> None:
        """Resolve a possible collision with ``item``."""

    def accept(self, visitor: Any) -> None:
        visitor.visit_collision_handler(self)


class ClickableButton(ABC):
    """Something that runs a callback when clicked."""

    @abstractmethod
    def on_click(self, callback: Callable[[], None]) -> None:
        """Set the function to call on click."""
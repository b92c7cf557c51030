"""The game world: items that are updated, drawn and collided every frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from wanderer.events import EventHandler
from wanderer.geometry import distance
from wanderer.items import CollisionHandler, CollisionItem, Item
from wanderer.visitors import ItemContext, SortItemsVisitor

BACKGROUND_COLOR = (87, 179, 113, 255)
MIN_DISTANCE_TO_HANDLE_COLLISION = 200.0


class Renderer(ABC):
    """Something that draws a whole frame."""

    @abstractmethod
    def render(self, deltatime: float) -> None:
        """Draw one frame, ``deltatime`` seconds after the previous one."""


class Scene(EventHandler, Renderer):
    """Updates and draws its items, then lets collision handlers react to nearby items.

    The render target needs ``clear(color)`` and ``draw(drawable)``.
    """

    def __init__(self, render_target: Any, parent: EventHandler | None = None) -> None:
        super().__init__()
        self.render_target = render_target
        self.item_context = ItemContext()
        self._items_to_draw: list[Item] = []
        if parent is not None:
            parent.add_event_handler(self)

    def render(self, deltatime: float) -> None:
        self.render_target.clear(BACKGROUND_COLOR)
        for item in self._items_to_draw:
            item.update(deltatime)
            item.draw(self.render_target)
        self.detect_collision()

    def add_item(self, item: Item) -> None:
        """Add an item to be drawn, filed by the kind of item it is."""
        item.accept(SortItemsVisitor(self.item_context))
        self._items_to_draw.append(item)

    def detect_collision(self) -> None:
        """Give every collision handler the collision items close enough to it."""
        for handler in self.item_context.collision_handlers:
            nearby = [
                item
                for item in self.item_context.collision_items
                if distance(handler.collision_center(), item.collision_center())
                < MIN_DISTANCE_TO_HANDLE_COLLISION
            ]
            self._handle_collision(handler, nearby)

    @staticmethod
    def _handle_collision(handler: CollisionHandler, items: list[CollisionItem]) -> None:
        for item in items:
            handler.handle_collision(item)
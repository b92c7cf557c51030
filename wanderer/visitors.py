"""Visitors over scene items and the context they sort items into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wanderer.items import CollisionHandler, CollisionItem, Item


@dataclass
class ItemContext:
    """Scene items grouped by what they take part in."""

    items: list[Item] = field(default_factory=list)
    collision_items: list[CollisionItem] = field(default_factory=list)
    collision_handlers: list[CollisionHandler] = field(default_factory=list)


class Visitor(ABC):
    """Called back by an item's ``accept`` with the item's most specific kind."""

    @abstractmethod
    def visit_item(self, item: Item) -> None:
        """Visit a plain item."""

    @abstractmethod
    def visit_collision_item(self, item: CollisionItem) -> None:
        """Visit an item that can be collided with."""

    @abstractmethod
    def visit_collision_handler(self, item: CollisionHandler) -> None:
        """Visit an item that resolves collisions."""


class DefaultVisitor(Visitor):
    """A visitor that ignores every kind of item."""

    def visit_item(self, item: Item) -> None:
        pass

    def visit_collision_item(self, item: CollisionItem) -> None:
        pass

    def visit_collision_handler(self, item: CollisionHandler) -> None:
        pass


class SortItemsVisitor(DefaultVisitor):
    """Appends each visited item to the matching list of an ItemContext."""

    def __init__(self, item_context: ItemContext) -> None:
        self.item_context = item_context

    def visit_item(self, item: Item) -> None:
        self.item_context.items.append(item)

    def visit_collision_item(self, item: CollisionItem) -> None:
        self.item_context.collision_items.append(item)

    def visit_collision_handler(self, item: CollisionHandler) -> None:
        self.item_context.collision_handlers.append(item)
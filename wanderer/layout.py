"""Layouts that arrange items inside a rectangle."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wanderer.events import EventHandler
from wanderer.geometry import Align, Point, Rect, Size
from wanderer.items import Item


class Layout(ABC):
    """Holds items and places them inside ``rect`` whenever its settings change."""

    def __init__(self, rect: Rect, event_handler: EventHandler | None = None) -> None:
        self.rect = rect
        self.event_handler = event_handler
        self._items: list[Item] = []
        self._alignment = Align.CENTER
        self._spacing = 0.0

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def add_item(self, item: Item) -> None:
        """Add an item once; adding the same item again does nothing."""
        if any(existing is item for existing in self._items):
            return
        self._items.append(item)
        self.update_geometry()

    @property
    def alignment(self) -> Align:
        return self._alignment

    @alignment.setter
    def alignment(self, alignment: Align) -> None:
        self._alignment = Align(alignment)
        self.update_geometry()

    @property
    def spacing(self) -> float:
        return self._spacing

    @spacing.setter
    def spacing(self, spacing: float) -> None:
        self._spacing = spacing
        self.update_geometry()

    @abstractmethod
    def update_geometry(self) -> None:
        """Reposition every item."""


class VerticalLayout(Layout):
    """Stacks items top to bottom, separated by the spacing."""

    def __init__(self, rect: Rect, event_handler: EventHandler | None = None) -> None:
        self._next_item_pos = Point(0.0, 0.0)
        super().__init__(rect, event_handler)

    def update_geometry(self) -> None:
        self._align_center()
        item_origin = Align.TOP
        alignment = self.alignment

        if alignment & Align.LEFT:
            self._next_item_pos.move_x(-self.rect.width() / 2)
            item_origin |= Align.LEFT
        if alignment & Align.RIGHT:
            self._next_item_pos.move_x(self.rect.width() / 2)
            item_origin |= Align.RIGHT
        if alignment & Align.TOP:
            self._next_item_pos.move_y(self.content_size().height / 2 - self.rect.height() / 2)
        if alignment & Align.BOTTOM:
            self._next_item_pos.move_y(self.rect.height() / 2 - self.content_size().height / 2)

        for item in self._items:
            item.set_origin(item_origin)
            item.set_pos(Point(self._next_item_pos.x, self._next_item_pos.y))
            self._next_item_pos.move_y(item.local_rect().height() + self.spacing)

    def content_size(self) -> Size:
        """Widest item by the total height of all items and the gaps between them."""
        size = Size(0.0, 0.0)
        for item in self._items:
            rect = item.global_rect()
            size.width = max(size.width, rect.width())
            size.height += rect.height()
        size.height += max(len(self._items) - 1, 0) * self.spacing
        return size

    def _align_center(self) -> None:
        self._next_item_pos = self.rect.center()
        self._next_item_pos.move_y(-self.content_size().height / 2)
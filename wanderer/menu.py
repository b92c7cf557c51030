"""The start menu: a column of buttons on a black background."""

from __future__ import annotations

from typing import Any

from wanderer.events import EventHandler
from wanderer.items import Item
from wanderer.layout import Layout, VerticalLayout
from wanderer.scene import Renderer

BACKGROUND_COLOR = (0, 0, 0, 255)


class Menu(Renderer):
    """Draws the items of its layout.

    The render target needs ``viewport()`` returning a Rect, ``clear(color)``
    and ``draw(drawable)``.
    """

    def __init__(self, render_target: Any, event_handler: EventHandler | None = None) -> None:
        self.render_target = render_target
        self.event_handler = event_handler
        self.layout: Layout = VerticalLayout(render_target.viewport(), event_handler)

    def render(self, deltatime: float) -> None:
        self.render_target.clear(BACKGROUND_COLOR)
        for item in self.layout.items:
            item.draw(self.render_target)

    def add_item(self, item: Item) -> None:
        self.layout.add_item(item)
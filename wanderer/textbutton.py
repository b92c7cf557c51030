"""A rectangular button with a centred caption."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from wanderer.events import Button, EventHandler, MousePressEvent, MouseReleaseEvent
from wanderer.geometry import Align, Point, Rect, Size
from wanderer.items import ClickableButton, Item
from wanderer.shapes import RectangleShape

BACKGROUND_COLOR = (50, 50, 50, 255)
PRESSED_COLOR = (255, 0, 0, 255)
TEXT_COLOR = (255, 255, 255, 255)


@dataclass
class _Label:
    """Caption text with its measured size, placed by its origin."""

    text: str
    font: Any
    size: Size
    position: Point = field(default_factory=Point)
    origin: Point = field(default_factory=Point)
    color: tuple[int, int, int, int] = TEXT_COLOR


class TextButton(Item, ClickableButton):
    """Runs its callback when the left mouse button is pressed on it and released."""

    def __init__(self, text: str, font: Any, size: Size, parent: EventHandler | None = None) -> None:
        super().__init__(parent)
        self.text = text
        self.font = font
        width, height = font.size(text) if font is not None else (0, 0)
        self.label = _Label(text, font, Size(width, height))
        self.shape = RectangleShape(size=Size(size.width, size.height))
        self._pressed = False
        self._on_click: Callable[[], None] = lambda: None
        self._setup()
        self._update_geometry()

    @property
    def pressed(self) -> bool:
        return self._pressed

    def draw(self, target: Any) -> None:
        target.draw(self.shape)
        target.draw(self.label)

    def set_pos(self, position: Point) -> None:
        self.shape.position = Point(position.x, position.y)
        self._update_geometry()

    def set_origin(self, origin: Align) -> None:
        self.shape.origin = self.local_rect().point_by(origin)

    def global_rect(self) -> Rect:
        return self.shape.global_bounds()

    def local_rect(self) -> Rect:
        return self.shape.local_bounds()

    def center(self) -> Point:
        return self.shape.transform().transform_point(self.shape.geometric_center())

    def set_text_color(self, color: tuple[int, int, int, int]) -> None:
        self.label.color = color

    def set_background_color(self, color: tuple[int, int, int, int]) -> None:
        self.shape.fill_color = color

    def on_click(self, callback: Callable[[], None]) -> None:
        self._on_click = callback

    def mouse_press_event(self, event: MousePressEvent) -> None:
        if event.button != Button.LEFT:
            return
        rect = self.global_rect()
        x, y = event.position.x, event.position.y
        hovered = (
            rect.pos.x < x < rect.pos.x + rect.width()
            and rect.pos.y < y < rect.pos.y + rect.height()
        )
        if hovered:
            self.shape.fill_color = PRESSED_COLOR
            self._pressed = True

    def mouse_release_event(self, event: MouseReleaseEvent) -> None:
        if event.button != Button.LEFT:
            return
        if self._pressed:
            self.shape.fill_color = BACKGROUND_COLOR
            self._on_click()
            self._pressed = False

    def _setup(self) -> None:
        self.shape.fill_color = BACKGROUND_COLOR
        text_size = self.label.size
        shape_bound = self.shape.local_bounds()
        if text_size.width > shape_bound.width():
            self.shape.size = Size(text_size.width, shape_bound.height())
        if text_size.height > shape_bound.height():
            self.shape.size = Size(shape_bound.width(), text_size.height)
        self.label.origin = Point(text_size.width / 2, text_size.height / 2)

    def _update_geometry(self) -> None:
        self.label.position = self.center()
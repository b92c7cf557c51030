"""Cameras that decide which part of the world is shown."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from wanderer.events import (
    Button,
    EventHandler,
    Key,
    KeyPressEvent,
    MouseMoveEvent,
    MousePressEvent,
    MouseReleaseEvent,
)
from wanderer.geometry import Point, Rect, Size

SPEED_CENTERING = 2.0


class View(EventHandler, ABC):
    """A camera given by the world point at its center and the visible size.

    The render target needs ``set_view(view)``.
    """

    def __init__(
        self,
        render_target: Any,
        center: Point,
        size: Size,
        parent: EventHandler | None = None,
    ) -> None:
        super().__init__()
        self.render_target = render_target
        self.center = Point(center.x, center.y)
        self.size = Size(size.width, size.height)
        if parent is not None:
            parent.add_event_handler(self)

    def move(self, offset: Point) -> None:
        self.center = self.center + offset

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the camera and make it the target's current view."""


class MenuView(View):
    """A fixed camera showing the given rectangle."""

    def __init__(self, render_target: Any, rect: Rect, parent: EventHandler | None = None) -> None:
        super().__init__(render_target, rect.center(), rect.size, parent)

    def update(self, delta_time: float) -> None:
        self.render_target.set_view(self)


class SceneView(View):
    """A camera that follows a target and can be dragged with the middle mouse button.

    The rectangle's position is taken as the view's center.
    """

    def __init__(self, render_target: Any, rect: Rect, parent: EventHandler | None = None) -> None:
        super().__init__(render_target, rect.pos, rect.size, parent)
        self.speed_centering = SPEED_CENTERING
        self._center_target: Any = None
        self._can_drag = False
        self._need_center = False

    def update(self, delta_time: float) -> None:
        if self._need_center:
            self.center_on_target(delta_time)
        self.render_target.set_view(self)

    def key_press_event(self, event: KeyPressEvent) -> None:
        if event.key == Key.F:
            self._need_center = True

    def mouse_press_event(self, event: MousePressEvent) -> None:
        if event.button == Button.MIDDLE:
            self._can_drag = True

    def mouse_release_event(self, event: MouseReleaseEvent) -> None:
        if event.button == Button.MIDDLE:
            self._can_drag = False

    def mouse_move_event(self, event: MouseMoveEvent) -> None:
        if not self._can_drag:
            return
        self.move(event.last_position - event.position)
        self._need_center = False

    def center_on_target(self, delta_time: float) -> None:
        """Move part of the way toward the target's center."""
        if self._center_target is None:
            return
        target_center = self._center_target.center()
        if self.center != target_center:
            delta = target_center - self.center
            self.move(delta * self.speed_centering * delta_time)

    def set_center_target(self, target: Any) -> None:
        """Follow ``target``, anything with a ``center()`` method."""
        self._center_target = target
        self._need_center = True
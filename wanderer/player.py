"""The character walked around the scene with the keyboard."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from wanderer.animation import Animation
from wanderer.events import EventHandler, Key, KeyPressEvent, KeyReleaseEvent, Mode
from wanderer.geometry import Align, Point, Rect, Size
from wanderer.items import CollisionHandler, CollisionItem
from wanderer.shapes import RectangleShape

_COLUMN_COUNT = 4
_ROW_COUNT = 8
_WALK_SWITCH_TIME = 0.25
_RUN_SWITCH_TIME = 0.15
_SCALING = Point(4.0, 4.0)
_HORIZONTAL_OFFSET = 10.0
_VERTICAL_OFFSET = 5.0
_WALK_SPEED = 100.0
_RUN_FACTOR = 1.5
_RUN_ROW_OFFSET = 4


@dataclass
class _Sprite(RectangleShape):
    """A rectangle showing one region of a texture."""

    texture: Any = None
    texture_rect: Rect = field(default_factory=Rect)

    def set_texture_rect(self, rect: Rect) -> None:
        self.texture_rect = rect
        self.size = Size(rect.width(), rect.height())


class Player(CollisionHandler):
    """An animated sprite moved by W/A/S/D, running while Shift is held."""

    def __init__(self, texture: Any, parent: EventHandler | None = None) -> None:
        super().__init__(parent)
        self.texture = texture
        width, height = texture.get_size()
        self.sprite = _Sprite(
            size=Size(width, height),
            texture=texture,
            texture_rect=Rect(Point(0, 0), Size(width, height)),
        )
        self.collision_shape = RectangleShape()
        self.animation = Animation(texture, _COLUMN_COUNT, _ROW_COUNT, _WALK_SWITCH_TIME)
        self._key_states = [False] * Key.MAX_SIZE
        self._keyboard_mode = Mode.NONE

        self._update_texture()
        self.sprite.scale_by(_SCALING)
        self._setup_collision()

    def draw(self, target: Any) -> None:
        target.draw(self.sprite)

    def update(self, deltatime: float) -> None:
        self._handle_moving(deltatime)
        self._update_texture()

    def set_pos(self, position: Point) -> None:
        self.sprite.position = Point(position.x, position.y)
        self._update_collision()

    def set_origin(self, origin: Align) -> None:
        self.sprite.origin = self.local_rect().point_by(origin)

    def handle_collision(self, item: CollisionItem) -> None:
        """Push the player out of ``item`` along the axis of least overlap."""
        offset = Point(0.0, 0.0)
        min_overlap = math.inf
        for axis in self.axes() + item.axes():
            current = self.projection_on(axis)
            other = item.projection_on(axis)
            if not current.overlap(other):
                return
            overlap = current.overlap_length(other)
            if overlap < min_overlap:
                min_overlap = overlap
                offset = axis * overlap

        between_centers = self.collision_center() - item.collision_center()
        if between_centers.dot(offset) < 0:
            offset = -offset
        self.move(offset)

    def center(self) -> Point:
        return self.global_rect().center()

    def collision_center(self) -> Point:
        shape = self.collision_shape
        return shape.transform().transform_point(shape.geometric_center())

    def vertices(self) -> list[Point]:
        shape = self.collision_shape
        transform = shape.transform()
        return [transform.transform_point(shape.point(i)) for i in range(shape.point_count())]

    def global_rect(self) -> Rect:
        return self.sprite.global_bounds()

    def local_rect(self) -> Rect:
        return self.sprite.local_bounds()

    def collision_rect(self) -> Rect:
        return self.collision_shape.global_bounds()

    def key_press_event(self, event: KeyPressEvent) -> None:
        self._key_states[event.key] = True
        self._keyboard_mode = event.mode

    def key_release_event(self, event: KeyReleaseEvent) -> None:
        self._key_states[event.key] = False
        self._keyboard_mode = event.mode

    def move(self, offset: Point) -> None:
        self.sprite.move(offset)
        self._update_collision()

    def _setup_collision(self) -> None:
        rect = self.sprite.global_bounds()
        self.collision_shape.size = Size(
            rect.height() / 2 - _HORIZONTAL_OFFSET, rect.height() / 2
        )
        bounds = self.collision_shape.global_bounds()
        self.collision_shape.origin = bounds.point_by(Align.BOTTOM) + Point(0.0, _VERTICAL_OFFSET)
        self._update_collision()

    def _update_texture(self) -> None:
        self.sprite.set_texture_rect(self.animation.view_rect())

    def _handle_moving(self, delta_time: float) -> None:
        row_offset = 0
        speed = _WALK_SPEED * delta_time
        self.animation.set_switch_time(_WALK_SWITCH_TIME)

        if self._keyboard_mode & Mode.SHIFT:
            speed *= _RUN_FACTOR
            row_offset = _RUN_ROW_OFFSET
            self.animation.set_switch_time(_RUN_SWITCH_TIME)

        delta = Point()
        if self._key_states[Key.A]:
            delta.move_x(-1)
            self.animation.set_row(row_offset + 2)
        if self._key_states[Key.D]:
            delta.move_x(1)
            self.animation.set_row(row_offset + 3)
        if self._key_states[Key.W]:
            delta.move_y(-1)
            self.animation.set_row(row_offset + 1)
        if self._key_states[Key.S]:
            delta.move_y(1)
            self.animation.set_row(row_offset + 0)

        if delta.is_default():
            self.animation.set_row(0)
            self.animation.set_column(1)
            return
        if delta.x != 0 and delta.y != 0:
            speed /= math.sqrt(2)

        self.move(delta * speed)
        self.animation.update(delta_time)

    def _update_collision(self) -> None:
        self.collision_shape.position = self.global_rect().point_by(Align.BOTTOM)
"""The game window: event pump, menu and scene switching, and drawing with pygame."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any

import pygame

from wanderer.events import (
    Button,
    EventHandler,
    Key,
    KeyPressEvent,
    KeyReleaseEvent,
    MouseMoveEvent,
    MousePressEvent,
    MouseReleaseEvent,
)
from wanderer.geometry import Point, Rect, Size
from wanderer.layout import VerticalLayout
from wanderer.menu import Menu
from wanderer.player import Player
from wanderer.rectangles import CollisionRect, RectItem
from wanderer.scene import Renderer, Scene
from wanderer.textbutton import TextButton
from wanderer.textures import PLAYER_TEXTURE_PATH, player_texture
from wanderer.views import MenuView, SceneView, View

FONT_PATH = "res/fonts/arial.ttf"
CHARACTER_SIZE = 30
BUTTON_SIZE = Size(180.0, 50.0)
MENU_SPACING = 20.0

_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_w: Key.W,
    pygame.K_f: Key.F,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_BUTTONS = {
    1: Button.LEFT,
    2: Button.MIDDLE,
    3: Button.RIGHT,
    6: Button.XBUTTON1,
    7: Button.XBUTTON2,
}


def _modifiers(mod: int) -> tuple[bool, bool, bool]:
    return bool(mod & pygame.KMOD_SHIFT), bool(mod & pygame.KMOD_ALT), bool(mod & pygame.KMOD_CTRL)


def _load_font(path: str | os.PathLike[str]) -> pygame.font.Font:
    try:
        return pygame.font.Font(os.fspath(path), CHARACTER_SIZE)
    except (OSError, pygame.error):
        print("GameMenu: Failed load font.", file=sys.stderr)
        return pygame.font.Font(None, CHARACTER_SIZE)


class MainWindow(EventHandler):
    """The game window; Escape or the Start button switches between menu and scene."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        name: str = "Game",
        *,
        font_path: str | os.PathLike[str] = FONT_PATH,
        texture_path: str | os.PathLike[str] = PLAYER_TEXTURE_PATH,
    ) -> None:
        super().__init__()
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(name)
        self._clock = pygame.time.Clock()
        self._open = True
        self._camera: View | None = None
        self._font_path = font_path

        self.menu_view = MenuView(
            self, Rect(Point(0.0, 0.0), Size(float(width), float(height))), self
        )
        self.menu = Menu(self, self)
        self.scene = Scene(self, self)
        self.player = Player(player_texture(texture_path), self.scene)
        self.scene_view = SceneView(
            self, Rect(self.player.center(), Size(float(width), float(height))), self
        )
        self._latest_mouse_move = MouseMoveEvent(Point(), Point())

        self.show_menu = True
        self._renderer: Renderer = self.menu
        self._view: View = self.menu_view

        self._compose_menu()
        self._compose_scene()

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def view(self) -> View:
        return self._view

    @property
    def is_open(self) -> bool:
        return self._open

    def game_loop(self) -> int:
        """Run frames until the window is closed; returns the exit status."""
        while self._open:
            delta_time = self._clock.tick() / 1000.0
            for event in pygame.event.get():
                self.handle_pygame_event(event)
            if not self._open:
                break
            self._view.update(delta_time)
            self._renderer.render(delta_time)
            pygame.display.flip()
        pygame.quit()
        return 0

    def key_press_event(self, event: KeyPressEvent) -> None:
        if event.key == Key.ESCAPE:
            self.switch_content()

    def handle_pygame_event(self, event: pygame.event.Event) -> None:
        """Translate one pygame event into the game's events and dispatch it."""
        if event.type == pygame.QUIT:
            self.close()
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYS.get(event.key)
            if key is None:
                return
            shift, alt, control = _modifiers(getattr(event, "mod", 0))
            event_class = KeyPressEvent if event.type == pygame.KEYDOWN else KeyReleaseEvent
            self.handle_event(event_class(key, shift, alt, control))
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _BUTTONS.get(event.button)
            if button is None:
                return
            position = self.map_pixel_to_coords(Point(*event.pos))
            event_class = MousePressEvent if event.type == pygame.MOUSEBUTTONDOWN else MouseReleaseEvent
            self.handle_event(event_class(button, position))
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            move = MouseMoveEvent(Point(float(x), float(y)), self._latest_mouse_move.position)
            self.handle_event(move)
            self._latest_mouse_move = move
        elif event.type == pygame.VIDEORESIZE:
            size = Size(float(event.w), float(event.h))
            self.menu_view.size = Size(size.width, size.height)
            self.scene_view.size = Size(size.width, size.height)

    def switch_content(self) -> None:
        """Toggle between the menu and the game scene."""
        self.show_menu = not self.show_menu
        if self.show_menu:
            self._renderer = self.menu
            self._view = self.menu_view
        else:
            self._renderer = self.scene
            self._view = self.scene_view

    def close(self) -> None:
        self._open = False

    # Render target interface used by menus, scenes and views.

    def viewport(self) -> Rect:
        width, height = self.surface.get_size()
        return Rect(Point(0.0, 0.0), Size(float(width), float(height)))

    def set_view(self, view: View | None) -> None:
        self._camera = view

    def clear(self, color: tuple[int, int, int, int]) -> None:
        self.surface.fill(color)

    def map_pixel_to_coords(self, pixel: Point) -> Point:
        """World coordinates shown at a window pixel under the current view."""
        rect = self._visible_rect()
        width, height = self.surface.get_size()
        return Point(
            rect.pos.x + pixel.x * rect.width() / width,
            rect.pos.y + pixel.y * rect.height() / height,
        )

    def map_coords_to_pixel(self, point: Point) -> Point:
        """Window pixel at which a world point is shown under the current view."""
        rect = self._visible_rect()
        width, height = self.surface.get_size()
        return Point(
            (point.x - rect.pos.x) * width / rect.width(),
            (point.y - rect.pos.y) * height / rect.height(),
        )

    def draw(self, drawable: Any) -> None:
        """Draw a sprite, a text label or a rectangle shape."""
        if hasattr(drawable, "texture_rect"):
            self._draw_sprite(drawable)
        elif hasattr(drawable, "text"):
            self._draw_label(drawable)
        else:
            self._draw_shape(drawable)

    def _visible_rect(self) -> Rect:
        if self._camera is None:
            return self.viewport()
        center, size = self._camera.center, self._camera.size
        return Rect(
            Point(center.x - size.width / 2, center.y - size.height / 2),
            Size(size.width, size.height),
        )

    def _draw_shape(self, shape: Any) -> None:
        transform = shape.transform()
        points = [
            tuple(self.map_coords_to_pixel(transform.transform_point(shape.point(index))))
            for index in range(shape.point_count())
        ]
        pygame.draw.polygon(self.surface, shape.fill_color, points)

    def _draw_sprite(self, sprite: Any) -> None:
        texture = sprite.texture
        frame = sprite.texture_rect
        if texture is None:
            return
        area = pygame.Rect(int(frame.pos.x), int(frame.pos.y), int(frame.width()), int(frame.height()))
        if area.width <= 0 or area.height <= 0 or not texture.get_rect().contains(area):
            return
        bounds = sprite.global_bounds()
        top_left = self.map_coords_to_pixel(bounds.pos)
        bottom_right = self.map_coords_to_pixel(
            Point(bounds.pos.x + bounds.width(), bounds.pos.y + bounds.height())
        )
        size = (round(bottom_right.x - top_left.x), round(bottom_right.y - top_left.y))
        if size[0] <= 0 or size[1] <= 0:
            return
        image = pygame.transform.scale(texture.subsurface(area), size)
        self.surface.blit(image, (round(top_left.x), round(top_left.y)))

    def _draw_label(self, label: Any) -> None:
        if label.font is None or not label.text:
            return
        image = label.font.render(label.text, True, label.color)
        pixel = self.map_coords_to_pixel(label.position - label.origin)
        self.surface.blit(image, (round(pixel.x), round(pixel.y)))

    def _compose_menu(self) -> None:
        layout = VerticalLayout(self.viewport(), self)
        layout.spacing = MENU_SPACING
        self.menu.layout = layout

        font = _load_font(self._font_path)
        start_button = TextButton("Start Game", font, Size(BUTTON_SIZE.width, BUTTON_SIZE.height), self)
        exit_button = TextButton("Exit", font, Size(BUTTON_SIZE.width, BUTTON_SIZE.height), self)
        start_button.on_click(self.switch_content)
        exit_button.on_click(self.close)

        self.menu.add_item(start_button)
        self.menu.add_item(exit_button)

    def _compose_scene(self) -> None:
        placements = [
            (CollisionRect(), Point(-100.0, 250.0)),
            (CollisionRect(), Point(123.0, -70.0)),
            (CollisionRect(), Point(250.0, -175.0)),
            (RectItem(), Point(-200.0, 50.0)),
        ]
        for item, position in placements:
            item.set_pos(position)
            self.scene.add_item(item)
        self.scene.add_item(self.player)
        self.scene_view.set_center_target(self.player)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run it until it is closed."""
    parser = argparse.ArgumentParser(prog="wanderer", description="A small top-down walking game.")
    parser.parse_args(argv)
    window = MainWindow(800, 600, "Game")
    return window.game_loop()


if __name__ == "__main__":
    raise SystemExit(main())
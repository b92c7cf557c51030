"""Input events and the handler tree that dispatches them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable

from wanderer.geometry import Point


class EventType(enum.Enum):
    KEY_PRESS = enum.auto()
    KEY_RELEASE = enum.auto()
    MOUSE_MOVE = enum.auto()
    MOUSE_PRESS = enum.auto()
    MOUSE_RELEASE = enum.auto()
    MOUSE_SCROLL = enum.auto()


class Key(enum.IntEnum):
    """Keyboard keys the game reacts to, numbered by their key codes."""

    A = 0
    D = 3
    F = 5
    S = 18
    W = 22
    ESCAPE = 36
    SPACE = 57
    LEFT = 71
    RIGHT = 72
    UP = 73
    DOWN = 74

    MAX_SIZE = 101


class Mode(enum.IntFlag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4


class Button(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    XBUTTON1 = 3
    XBUTTON2 = 4

    MAX_SIZE = 5


class Event(ABC):
    """Base of all input events."""

    @abstractmethod
    def type(self) -> EventType:
        """The kind of event."""


def _modifiers(shift: bool, alt: bool, control: bool) -> Mode:
    mode = Mode.NONE
    if shift:
        mode |= Mode.SHIFT
    if alt:
        mode |= Mode.ALT
    if control:
        mode |= Mode.CONTROL
    return mode


class _KeyEvent(Event):
    def __init__(self, key: Key, shift: bool = False, alt: bool = False, control: bool = False):
        self.key = Key(key)
        self.mode = _modifiers(shift, alt, control)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, mode={self.mode!r})"


class KeyPressEvent(_KeyEvent):
    def type(self) -> EventType:
        return EventType.KEY_PRESS


class KeyReleaseEvent(_KeyEvent):
    def type(self) -> EventType:
        return EventType.KEY_RELEASE


class MouseMoveEvent(Event):
    def __init__(self, position: Point, last_position: Point):
        self.position = position
        self.last_position = last_position

    def type(self) -> EventType:
        return EventType.MOUSE_MOVE

    def __repr__(self) -> str:
        return f"MouseMoveEvent(position={self.position!r}, last_position={self.last_position!r})"


class _MouseButtonEvent(Event):
    def __init__(self, button: Button, position: Point):
        self.button = Button(button)
        self.position = position

    def __repr__(self) -> str:
        return f"{type(self).__name__}(button={self.button!r}, position={self.position!r})"


class MousePressEvent(_MouseButtonEvent):
    def type(self) -> EventType:
        return EventType.MOUSE_PRESS


class MouseReleaseEvent(_MouseButtonEvent):
    def type(self) -> EventType:
        return EventType.MOUSE_RELEASE


_DISPATCH = {
    EventType.KEY_PRESS: "key_press_event",
    EventType.KEY_RELEASE: "key_release_event",
    EventType.MOUSE_MOVE: "mouse_move_event",
    EventType.MOUSE_PRESS: "mouse_press_event",
    EventType.MOUSE_RELEASE: "mouse_release_event",
}

Listener = Callable[[Event], None]


class EventHandler:
    """Receives events, reacts through its hook methods and forwards to children.

    The default hooks call the listeners subscribed for the event's type;
    subclasses override the hooks to define their own reaction.
    """

    def __init__(self) -> None:
        super().__init__()
        self._handlers: list[EventHandler] = []
        self._listeners: dict[EventType, list[Listener]] = {}

    def handle_event(self, event: Event) -> None:
        """Call the hook matching the event, then pass it to every child handler."""
        hook = _DISPATCH.get(event.type())
        if hook is not None:
            getattr(self, hook)(event)
        for handler in self.event_handlers():
            handler.handle_event(event)

    def event_handlers(self) -> list[EventHandler]:
        return list(self._handlers)

    def add_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def remove_event_handler(self, handler: EventHandler) -> None:
        """Remove a child handler; raises ValueError if it is not registered."""
        self._handlers.remove(handler)

    def subscribe(self, event_type: EventType, listener: Listener) -> None:
        """Call ``listener`` from the default hook for events of ``event_type``."""
        self._listeners.setdefault(event_type, []).append(listener)

    def _notify(self, event: Event) -> None:
        for listener in list(self._listeners.get(event.type(), ())):
            listener(event)

    def key_press_event(self, event: KeyPressEvent) -> None:
        self._notify(event)

    def key_release_event(self, event: KeyReleaseEvent) -> None:
        self._notify(event)

    def mouse_press_event(self, event: MousePressEvent) -> None:
        self._notify(event)

    def mouse_release_event(self, event: MouseReleaseEvent) -> None:
        self._notify(event)

    def mouse_move_event(self, event: MouseMoveEvent) -> None:
        self._notify(event)
import pytest

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
from wanderer.views import MenuView, SceneView, View


class FakeTarget:
    def __init__(self):
        self.views = []

    def set_view(self, view):
        self.views.append(view)


class Marker:
    def __init__(self, point):
        self.point = point

    def center(self):
        return self.point


def drag(view, start, end):
    view.handle_event(MousePressEvent(Button.MIDDLE, start))
    view.handle_event(MouseMoveEvent(end, start))


def test_view_is_abstract():
    with pytest.raises(TypeError):
        View(FakeTarget(), Point(), Size())


def test_menu_view_centers_on_rect_and_registers():
    parent = EventHandler()
    target = FakeTarget()
    view = MenuView(target, Rect(Point(0.0, 0.0), Size(800.0, 600.0)), parent)
    assert view.center == Point(400.0, 300.0)
    assert view.size == Size(800.0, 600.0)
    assert parent.event_handlers() == [view]
    view.update(0.1)
    assert target.views == [view]


def test_scene_view_uses_rect_position_as_center():
    view = SceneView(FakeTarget(), Rect(Point(10.0, 20.0), Size(800.0, 600.0)), None)
    assert view.center == Point(10.0, 20.0)
    assert view.speed_centering == 2.0


def test_move_shifts_center():
    view = SceneView(FakeTarget(), Rect(Point(10.0, 20.0), Size(8.0, 6.0)), None)
    view.move(Point(1.0, -2.0))
    assert view.center == Point(11.0, 18.0)


def test_mouse_move_without_middle_press_does_nothing():
    view = SceneView(FakeTarget(), Rect(Point(10.0, 20.0), Size(8.0, 6.0)), None)
    view.handle_event(MousePressEvent(Button.LEFT, Point()))
    view.handle_event(MouseMoveEvent(Point(5.0, 5.0), Point(10.0, 10.0)))
    assert view.center == Point(10.0, 20.0)


def test_middle_drag_moves_against_the_mouse():
    view = SceneView(FakeTarget(), Rect(Point(10.0, 20.0), Size(8.0, 6.0)), None)
    drag(view, Point(10.0, 10.0), Point(5.0, 5.0))
    assert view.center == Point(15.0, 25.0)


def test_release_stops_dragging():
    view = SceneView(FakeTarget(), Rect(Point(10.0, 20.0), Size(8.0, 6.0)), None)
    view.handle_event(MousePressEvent(Button.MIDDLE, Point()))
    view.handle_event(MouseReleaseEvent(Button.MIDDLE, Point()))
    view.handle_event(MouseMoveEvent(Point(5.0, 5.0), Point(10.0, 10.0)))
    assert view.center == Point(10.0, 20.0)


def test_update_moves_toward_target_and_sets_view():
    target = FakeTarget()
    view = SceneView(target, Rect(Point(0.0, 0.0), Size(8.0, 6.0)), None)
    goal = Point(40.0, -20.0)
    view.set_center_target(Marker(goal))
    view.update(0.5)
    assert view.center == goal
    assert target.views == [view]


def test_partial_step_gets_closer():
    view = SceneView(FakeTarget(), Rect(Point(0.0, 0.0), Size(8.0, 6.0)), None)
    goal = Point(40.0, -20.0)
    view.set_center_target(Marker(goal))
    before = goal - view.center
    view.update(0.1)
    after = goal - view.center
    assert after.dot(after) < before.dot(before)


def test_drag_cancels_centering_and_f_restores_it():
    view = SceneView(FakeTarget(), Rect(Point(0.0, 0.0), Size(8.0, 6.0)), None)
    goal = Point(40.0, -20.0)
    view.set_center_target(Marker(goal))
    drag(view, Point(0.0, 0.0), Point(-3.0, 0.0))
    dragged = Point(view.center.x, view.center.y)
    view.update(0.5)
    assert view.center == dragged
    view.handle_event(KeyPressEvent(Key.F))
    view.update(0.5)
    assert view.center == goal


def test_f_without_target_keeps_center():
    view = SceneView(FakeTarget(), Rect(Point(3.0, 4.0), Size(8.0, 6.0)), None)
    view.handle_event(KeyPressEvent(Key.F))
    view.update(0.5)
    assert view.center == Point(3.0, 4.0)
import pytest

from wanderer.events import Button, EventHandler, MousePressEvent, MouseReleaseEvent
from wanderer.geometry import Align, Point, Size
from wanderer.textbutton import BACKGROUND_COLOR, PRESSED_COLOR, TextButton


class FakeFont:
    def __init__(self, width=100, height=20):
        self.measure = (width, height)

    def size(self, text):
        return self.measure


class Recorder:
    def __init__(self):
        self.drawn = []

    def draw(self, obj):
        self.drawn.append(obj)


def make_button(parent=None, font=None):
    return TextButton("Start Game", font or FakeFont(), Size(180.0, 50.0), parent)


def click(button, position, which=Button.LEFT):
    button.mouse_press_event(MousePressEvent(which, position))
    button.mouse_release_event(MouseReleaseEvent(which, position))


def test_shape_keeps_requested_size_for_short_text():
    rect = make_button().global_rect()
    assert (rect.width(), rect.height()) == pytest.approx((180, 50))


def test_wide_text_widens_shape():
    button = TextButton("Exit", FakeFont(300, 20), Size(180.0, 50.0))
    assert button.local_rect().width() == pytest.approx(300)
    assert button.local_rect().height() == pytest.approx(50)


def test_tall_text_heightens_shape_from_original_width():
    button = TextButton("Exit", FakeFont(300, 80), Size(180.0, 50.0))
    assert button.local_rect().width() == pytest.approx(180)
    assert button.local_rect().height() == pytest.approx(80)


def test_label_is_centred_on_button():
    button = make_button()
    button.set_pos(Point(40, 60))
    target = Recorder()
    button.draw(target)
    shape, label = target.drawn
    assert shape is button.shape
    assert tuple(label.position) == pytest.approx(tuple(button.center()))
    assert tuple(label.origin) == pytest.approx((50, 10))


def test_center_origin_places_center_at_position():
    button = make_button()
    button.set_origin(Align.CENTER)
    button.set_pos(Point(400, 300))
    assert tuple(button.center()) == pytest.approx((400, 300))


def test_click_inside_runs_callback():
    calls = []
    button = make_button()
    button.on_click(lambda: calls.append("clicked"))
    click(button, Point(90, 25))
    assert calls == ["clicked"]
    assert button.shape.fill_color == BACKGROUND_COLOR
    assert not button.pressed


def test_press_inside_highlights():
    button = make_button()
    button.mouse_press_event(MousePressEvent(Button.LEFT, Point(10, 10)))
    assert button.pressed
    assert button.shape.fill_color == PRESSED_COLOR


def test_click_outside_does_nothing():
    calls = []
    button = make_button()
    button.on_click(lambda: calls.append(1))
    click(button, Point(500, 500))
    assert calls == []


def test_click_on_border_does_not_count():
    calls = []
    button = make_button()
    button.on_click(lambda: calls.append(1))
    click(button, Point(0, 25))
    assert calls == []


def test_right_button_ignored():
    calls = []
    button = make_button()
    button.on_click(lambda: calls.append(1))
    click(button, Point(90, 25), Button.RIGHT)
    assert calls == []
    assert not button.pressed


def test_release_without_press_does_nothing():
    calls = []
    button = make_button()
    button.on_click(lambda: calls.append(1))
    button.mouse_release_event(MouseReleaseEvent(Button.LEFT, Point(90, 25)))
    assert calls == []


def test_events_reach_button_through_parent():
    calls = []
    parent = EventHandler()
    button = make_button(parent)
    button.on_click(lambda: calls.append(1))
    parent.handle_event(MousePressEvent(Button.LEFT, Point(90, 25)))
    parent.handle_event(MouseReleaseEvent(Button.LEFT, Point(90, 25)))
    assert calls == [1]


def test_colors_can_be_changed():
    button = make_button()
    button.set_text_color((0, 0, 255, 255))
    button.set_background_color((0, 255, 0, 255))
    assert button.label.color == (0, 0, 255, 255)
    assert button.shape.fill_color == (0, 255, 0, 255)


def test_missing_font_measures_empty_text():
    button = TextButton("Exit", None, Size(180.0, 50.0))
    assert button.label.size == Size(0, 0)
    assert button.local_rect().width() == pytest.approx(180)
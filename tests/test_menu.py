import pytest

from wanderer.geometry import Align, Point, Rect, Size
from wanderer.layout import VerticalLayout
from wanderer.menu import Menu
from wanderer.rectangles import RectItem
from wanderer.scene import Renderer

VIEWPORT = Rect(Point(0.0, 0.0), Size(800.0, 600.0))


class FakeTarget:
    def __init__(self):
        self.cleared = []
        self.drawn = []

    def viewport(self):
        return Rect(Point(VIEWPORT.pos.x, VIEWPORT.pos.y), Size(VIEWPORT.width(), VIEWPORT.height()))

    def clear(self, color):
        self.cleared.append(color)

    def draw(self, drawable):
        self.drawn.append(drawable)


def test_menu_is_a_renderer_with_viewport_layout():
    menu = Menu(FakeTarget(), None)
    assert isinstance(menu, Renderer)
    assert isinstance(menu.layout, VerticalLayout)
    assert menu.layout.rect == VIEWPORT


def test_add_item_goes_into_layout_and_is_centered():
    menu = Menu(FakeTarget(), None)
    item = RectItem()
    menu.add_item(item)
    assert menu.layout.items == [item]
    assert item.center().x == pytest.approx(VIEWPORT.center().x)


def test_render_clears_black_and_draws_items_in_order():
    target = FakeTarget()
    menu = Menu(target, None)
    first, second = RectItem(), RectItem()
    menu.add_item(first)
    menu.add_item(second)
    menu.render(0.016)
    assert target.cleared == [(0, 0, 0, 255)]
    assert target.drawn == [first.shape, second.shape]


def test_render_without_items_only_clears():
    target = FakeTarget()
    Menu(target, None).render(0.0)
    assert target.cleared == [(0, 0, 0, 255)]
    assert target.drawn == []


def test_replaced_layout_receives_new_items():
    menu = Menu(FakeTarget(), None)
    layout = VerticalLayout(VIEWPORT, None)
    layout.alignment = Align.TOP
    menu.layout = layout
    item = RectItem()
    menu.add_item(item)
    assert layout.items == [item]
    assert item.global_rect().pos.y == pytest.approx(VIEWPORT.pos.y)
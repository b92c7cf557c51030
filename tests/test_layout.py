import pytest

from wanderer.geometry import Align, Point, Rect, Size
from wanderer.layout import Layout, VerticalLayout
from wanderer.rectangles import RectItem

AREA = Rect(Point(0.0, 0.0), Size(200.0, 400.0))


def make_layout(count=2, spacing=0.0, alignment=None):
    layout = VerticalLayout(Rect(Point(0.0, 0.0), Size(200.0, 400.0)), None)
    layout.spacing = spacing
    if alignment is not None:
        layout.alignment = alignment
    items = [RectItem() for _ in range(count)]
    for item in items:
        layout.add_item(item)
    return layout, items


def bottom(item):
    rect = item.global_rect()
    return rect.pos.y + rect.height()


def test_layout_is_abstract():
    with pytest.raises(TypeError):
        Layout(AREA, None)


def test_defaults():
    layout = VerticalLayout(AREA, None)
    assert layout.alignment == Align.CENTER
    assert layout.spacing == 0
    assert layout.items == []
    assert layout.rect == AREA


def test_duplicate_item_is_ignored():
    layout = VerticalLayout(AREA, None)
    item = RectItem()
    layout.add_item(item)
    layout.add_item(item)
    assert layout.items == [item]


@pytest.mark.parametrize("spacing", [0.0, 20.0])
def test_items_are_stacked_with_spacing(spacing):
    _, items = make_layout(count=3, spacing=spacing)
    for upper, lower in zip(items, items[1:]):
        assert lower.global_rect().pos.y == pytest.approx(bottom(upper) + spacing)


def test_centered_by_default():
    _, items = make_layout(count=3, spacing=10.0)
    top = items[0].global_rect().pos.y
    assert (top + bottom(items[-1])) / 2 == pytest.approx(AREA.center().y)
    for item in items:
        assert item.center().x == pytest.approx(AREA.center().x)


def test_align_left():
    _, items = make_layout(alignment=Align.LEFT)
    for item in items:
        assert item.global_rect().pos.x == pytest.approx(AREA.pos.x)
    top = items[0].global_rect().pos.y
    assert (top + bottom(items[-1])) / 2 == pytest.approx(AREA.center().y)


def test_align_right():
    _, items = make_layout(alignment=Align.RIGHT)
    for item in items:
        rect = item.global_rect()
        assert rect.pos.x + rect.width() == pytest.approx(AREA.pos.x + AREA.width())


def test_align_top():
    _, items = make_layout(alignment=Align.TOP, spacing=5.0)
    assert items[0].global_rect().pos.y == pytest.approx(AREA.pos.y)


def test_align_bottom():
    _, items = make_layout(alignment=Align.BOTTOM, spacing=5.0)
    assert bottom(items[-1]) == pytest.approx(AREA.bottom_left().y)


def test_changing_alignment_repositions_existing_items():
    layout, items = make_layout()
    layout.alignment = Align.TOP | Align.LEFT
    assert items[0].global_rect().top_left() == Point(pytest.approx(0.0), pytest.approx(0.0))


def test_content_size():
    layout, items = make_layout(count=3, spacing=20.0)
    size = layout.content_size()
    heights = [item.global_rect().height() for item in items]
    assert size.width == pytest.approx(items[0].global_rect().width())
    assert size.height == pytest.approx(sum(heights) + 2 * 20.0)


def test_content_size_of_empty_layout():
    layout = VerticalLayout(AREA, None)
    assert layout.content_size() == Size(0.0, 0.0)
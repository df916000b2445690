import pytest

from bubblepopper.box import Box


def test_default_box_is_unit_at_origin():
    box = Box()
    assert (box.pos_x, box.pos_y, box.width, box.height) == (0.0, 0.0, 1.0, 1.0)


def test_overlapping_boxes_intersect():
    a = Box(0, 0, 50, 50)
    b = Box(20, 20, 50, 50)
    assert a.intersect(b)
    assert b.intersect(a)


def test_touching_edges_do_not_intersect():
    a = Box(0, 0, 2, 2)
    b = Box(2, 0, 2, 2)
    assert not a.intersect(b)


@pytest.mark.parametrize(
    "a, b",
    [
        (Box(0, 0, 2, 2), Box(10, 0, 2, 2)),
        (Box(0, 0, 2, 2), Box(0, 10, 2, 2)),
        (Box(5, 5, 1, 1), Box(-5, -5, 1, 1)),
    ],
)
def test_distant_boxes_do_not_intersect(a, b):
    assert not a.intersect(b)
    assert not b.intersect(a)


def test_box_intersects_itself():
    box = Box(3, 4, 5, 6)
    assert box.intersect(box)


def test_intersect_down_no_horizontal_overlap_is_zero():
    a = Box(0, 0, 2, 2)
    b = Box(10, 1, 2, 2)
    assert a.intersect_down(b) == 0.0


def test_intersect_down_when_below_is_zero():
    a = Box(0, 5, 2, 2)
    b = Box(0, 4, 2, 2)
    assert a.intersect_down(b) == 0.0


def test_intersect_down_offset_separates_boxes():
    a = Box(0, 0, 2, 2)
    b = Box(0, 1, 2, 2)
    offset = a.intersect_down(b)
    assert offset < 0.0
    moved = Box(a.pos_x, a.pos_y + offset, a.width, a.height)
    assert not moved.intersect(b)


def test_intersect_down_with_gap_is_zero():
    a = Box(0, 0, 2, 2)
    b = Box(0, 10, 2, 2)
    assert a.intersect_down(b) == 0.0


def test_intersect_sideways_from_left_separates():
    a = Box(0, 0, 2, 2)
    b = Box(1, 0, 2, 2)
    offset = a.intersect_sideways(b)
    assert offset < 0.0
    moved = Box(a.pos_x + offset, a.pos_y, a.width, a.height)
    assert not moved.intersect(b)


def test_intersect_sideways_from_right_separates():
    a = Box(1, 0, 2, 2)
    b = Box(0, 0, 2, 2)
    offset = a.intersect_sideways(b)
    assert offset > 0.0
    moved = Box(a.pos_x + offset, a.pos_y, a.width, a.height)
    assert not moved.intersect(b)


def test_intersect_sideways_vertical_check_uses_widths():
    a = Box(0, 0, 2, 10)
    b = Box(1, 3, 2, 10)
    assert a.intersect(b)
    assert a.intersect_sideways(b) == 0.0


def test_intersect_sideways_far_left_is_zero():
    a = Box(-10, 0, 2, 2)
    b = Box(0, 0, 2, 2)
    assert a.intersect_sideways(b) == 0.0
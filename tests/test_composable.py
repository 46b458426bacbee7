import pytest

from plotweave.basic_shapes import Circle, Pixel, Rectangle
from plotweave.color import BLACK, BLUE, RED
from plotweave.composable import BoxedElement, ComposedElement, EmptyElement


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_circle(self, center, radius, style, fill):
        self.calls.append(("circle", center, radius))

    def draw_rect(self, upper_left, bottom_right, style, fill):
        self.calls.append(("rect", upper_left, bottom_right))

    def draw_pixel(self, point, color):
        self.calls.append(("pixel", point))


def test_empty_element_draws_nothing():
    backend = RecordingBackend()
    empty = EmptyElement.at((5, 6))
    empty.draw(iter([(5, 6)]), backend, (100, 100))
    assert backend.calls == []
    assert list(empty.point_iter()) == [(5, 6)]


def test_boxed_element_shifts_inner_points():
    backend = RecordingBackend()
    ox, oy = 200, 210
    boxed = EmptyElement.at((0.5, 0.6)) + Circle((0, 0), 3, BLACK)
    assert isinstance(boxed, BoxedElement)
    assert list(boxed.point_iter()) == [(0.5, 0.6)]
    boxed.draw(iter([(ox, oy)]), backend, (640, 480))
    assert backend.calls == [("circle", (ox, oy), 3)]


def test_composed_element_draws_all_parts_in_order():
    backend = RecordingBackend()
    ox, oy = 200, 210
    element = (
        EmptyElement.at((1, 1))
        + Circle((0, 0), 3, BLACK)
        + Rectangle([(0, 0), (10, 12)], RED)
        + Pixel((4, 5), BLUE)
    )
    assert isinstance(element, ComposedElement)
    assert list(element.point_iter()) == [(1, 1)]
    element.draw(iter([(ox, oy)]), backend, (640, 480))
    assert backend.calls == [
        ("circle", (ox, oy), 3),
        ("rect", (ox, oy), (ox + 10, oy + 12)),
        ("pixel", (ox + 4, oy + 5)),
    ]


def test_nested_composition_keeps_zero_offset():
    element = EmptyElement.at((7, 8)) + Circle((0, 0), 1, BLACK) + Circle((1, 1), 1, BLACK)
    element = element + Circle((2, 2), 1, BLACK)
    assert isinstance(element.second, ComposedElement)
    assert list(element.second.point_iter()) == [(0, 0)]


def test_no_origin_draws_nothing():
    backend = RecordingBackend()
    element = EmptyElement.at((0, 0)) + Circle((0, 0), 3, BLACK) + Circle((1, 1), 3, BLACK)
    element.draw(iter([]), backend, (10, 10))
    assert backend.calls == []


def test_adding_non_element_raises():
    with pytest.raises(TypeError):
        EmptyElement.at((0, 0)) + 5
import pytest

from plotweave.basic_shapes import Circle, PathElement, Pixel, Polygon
from plotweave.color import BLUE, GREEN, RED, TRANSPARENT, ShapeStyle
from plotweave.composable import EmptyElement
from plotweave.points import Cross
from plotweave.series import AreaSeries, LineSeries, PointSeries


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_pixel(self, point, color):
        self.calls.append(("pixel", point, color))

    def draw_line(self, start, end, color):
        self.calls.append(("line", start, end, color))

    def draw_path(self, points, style):
        self.calls.append(("path", list(points), style))

    def draw_rect(self, upper_left, bottom_right, style, fill):
        self.calls.append(("rect", upper_left, bottom_right, style, fill))

    def draw_circle(self, center, radius, style, fill):
        self.calls.append(("circle", center, radius, style, fill))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))

    def draw_text(self, text, style, pos):
        self.calls.append(("text", text, style, pos))


def draw_all(series, dim=(200, 200)):
    backend = RecordingBackend()
    for element in series:
        element.draw(element.point_iter(), backend, dim)
    return backend


def test_line_series_draws_single_path():
    series = LineSeries(((x, x) for x in range(100)), ShapeStyle.from_color(RED).with_stroke_width(3))
    backend = draw_all(series)
    assert len(backend.calls) == 1
    kind, path, style = backend.calls[0]
    assert kind == "path"
    assert style.color == RED.to_rgba()
    assert style.stroke_width == 3
    assert path == [(x, x) for x in range(100)]


def test_line_series_with_points_draws_circles_then_path():
    data = [(1, 2), (3, 4), (5, 6)]
    backend = draw_all(LineSeries(data, BLUE).point_size(4))
    kinds = [call[0] for call in backend.calls]
    assert kinds == ["circle", "circle", "circle", "path"]
    assert [call[1] for call in backend.calls[:3]] == data
    assert all(call[2] == 4 for call in backend.calls[:3])
    assert backend.calls[3][1] == data


def test_line_series_empty_yields_nothing():
    assert list(LineSeries([], RED).point_size(3)) == []


def test_line_series_elements_keep_points():
    data = [(0, 0), (10, 20)]
    elements = list(LineSeries(data, RED))
    assert len(elements) == 1
    assert list(elements[0].point_iter()) == data
    assert isinstance(elements[0].inner, PathElement)


def test_area_series_polygon_closes_on_baseline():
    data = [(0, 1), (1, 3), (2, 2)]
    elements = list(AreaSeries(data, 0, GREEN))
    assert len(elements) == 2
    polygon, border = elements
    assert isinstance(polygon.inner, Polygon)
    assert list(polygon.point_iter()) == data + [(2, 0), (0, 0)]
    assert list(border.point_iter()) == data


def test_area_series_default_border_is_transparent():
    backend = draw_all(AreaSeries([(0, 1), (1, 2)], 0, GREEN))
    kinds = [call[0] for call in backend.calls]
    assert kinds == ["polygon", "path"]
    assert backend.calls[0][2] == GREEN.to_rgba()
    assert backend.calls[1][2].color == TRANSPARENT


def test_area_series_border_style_is_used():
    backend = draw_all(AreaSeries([(0, 1), (1, 2)], 0, GREEN).border_style(RED))
    assert backend.calls[1][2].color == RED.to_rgba()


def test_area_series_empty_data_yields_empty_shapes():
    elements = list(AreaSeries([], 0, GREEN))
    assert len(elements) == 2
    assert all(list(e.point_iter()) == [] for e in elements)


def test_point_series_default_marker_is_circle():
    data = [(1, 1), (2, 4)]
    elements = list(PointSeries(data, 5, RED))
    assert all(isinstance(e, Circle) for e in elements)
    assert [next(e.point_iter()) for e in elements] == data
    backend = draw_all(elements)
    assert [call[2] for call in backend.calls] == [5, 5]


def test_point_series_with_cross_marker():
    elements = list(PointSeries([(10, 10)], 2, BLUE, Cross))
    backend = draw_all(elements)
    assert [call[0] for call in backend.calls] == ["line", "line"]
    assert backend.calls[0][1:3] == ((8, 8), (12, 12))


def test_point_series_with_pixel_marker_ignores_size():
    backend = draw_all(PointSeries([(3, 7)], 9, RED, Pixel))
    assert backend.calls == [("pixel", (3, 7), RED.to_rgba())]


def test_point_series_of_element_uses_constructor():
    seen = []

    def cons(coord, size, style):
        seen.append((coord, size, style.filled))
        return EmptyElement.at(coord) + Circle((0, 0), size, style.as_filled())

    data = [(20, 30), (40, 50)]
    backend = draw_all(PointSeries.of_element(data, 5, RED, cons))
    assert seen == [((20, 30), 5, False), ((40, 50), 5, False)]
    assert [call[1] for call in backend.calls] == data
    assert all(call[4] is True for call in backend.calls)


def test_point_series_of_element_rejects_non_callable():
    with pytest.raises(TypeError):
        PointSeries.of_element([(0, 0)], 1, RED, 42)
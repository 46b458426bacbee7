import pytest

from plotweave.color import BLUE, RED
from plotweave.points import Cross, TriangleMarker
from plotweave.size import percent_width


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_line(self, start, end, color):
        self.calls.append(("line", start, end, color))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))


def test_cross_point_iter_is_center():
    cross = Cross((3, 4), 5, RED)
    assert list(cross.point_iter()) == [(3, 4)]


def test_cross_draws_two_lines_through_center():
    backend = RecordingBackend()
    cx, cy, size = 150, 151, 20
    Cross((0, 0), size, RED).draw(iter([(cx, cy)]), backend, (300, 300))
    assert len(backend.calls) == 2
    for kind, start, end, color in backend.calls:
        assert kind == "line"
        assert color == RED.to_rgba()
        assert (start[0] + end[0]) / 2 == cx
        assert (start[1] + end[1]) / 2 == cy
        assert abs(end[0] - start[0]) == 2 * size
        assert abs(end[1] - start[1]) == 2 * size
    first, second = backend.calls
    assert first[1] == (cx - size, cy - size)
    assert second[1] == (cx - size, cy + size)


def test_cross_relative_size_uses_parent_dimension():
    backend = RecordingBackend()
    Cross((0, 0), percent_width(10), RED).draw(iter([(100, 100)]), backend, (200, 400))
    _, start, end, _ = backend.calls[0]
    expected = percent_width(10).in_pixels((200, 400))
    assert end[0] - start[0] == 2 * expected


def test_cross_without_points_draws_nothing():
    backend = RecordingBackend()
    Cross((0, 0), 4, RED).draw(iter([]), backend, (10, 10))
    assert backend.calls == []


def test_triangle_marker_vertices():
    backend = RecordingBackend()
    cx, cy, size = 150, 151, 20
    TriangleMarker((0, 0), size, BLUE).draw(iter([(cx, cy)]), backend, (300, 300))
    assert len(backend.calls) == 1
    kind, vertices, color = backend.calls[0]
    assert kind == "polygon"
    assert color == BLUE.to_rgba()
    assert len(vertices) == 3
    assert vertices[0] == (cx, cy - size)
    left, right = vertices[1], vertices[2]
    assert left[0] < cx < right[0]
    assert left[1] > cy and right[1] > cy


def test_make_point_builds_same_element():
    style = BLUE.filled()
    cross = Cross.make_point((1, 2), 3, style)
    tri = TriangleMarker.make_point((1, 2), 3, style)
    assert isinstance(cross, Cross)
    assert isinstance(tri, TriangleMarker)
    assert cross.style == style and tri.style == style
    assert list(tri.point_iter()) == [(1, 2)]


def test_bad_style_raises():
    with pytest.raises(TypeError):
        Cross((0, 0), 3, "red")
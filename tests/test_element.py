import pytest

from plotweave.element import DynElement, Element, into_dyn


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_path(self, points, style):
        self.calls.append(("path", list(points), style))


class Marker(Element):
    def __init__(self, points):
        self.points = list(points)

    def point_iter(self):
        return iter(self.points)

    def draw(self, points, backend, parent_dim):
        backend.draw_path(list(points), parent_dim)


def test_element_is_abstract():
    with pytest.raises(TypeError):
        Element()


def test_into_dyn_copies_points():
    marker = Marker([(1, 2), (3, 4)])
    dyn = into_dyn(marker)
    assert list(dyn.point_iter()) == [(1, 2), (3, 4)]
    marker.points.append((5, 6))
    assert list(dyn.point_iter()) == [(1, 2), (3, 4)]


def test_dyn_element_delegates_draw():
    dyn = into_dyn(Marker([(0, 0)]))
    backend = RecordingBackend()
    dyn.draw(iter([(10, 20), (30, 40)]), backend, (100, 50))
    assert backend.calls == [("path", [(10, 20), (30, 40)], (100, 50))]


def test_dyn_element_inner():
    marker = Marker([])
    dyn = into_dyn(marker)
    assert dyn.inner is marker
    assert list(dyn.point_iter()) == []


def test_dyn_element_can_be_nested():
    nested = into_dyn(into_dyn(Marker([(7, 8)])))
    assert isinstance(nested.inner, DynElement)
    assert list(nested.point_iter()) == [(7, 8)]
    backend = RecordingBackend()
    nested.draw([(1, 1)], backend, (2, 2))
    assert backend.calls == [("path", [(1, 1)], (2, 2))]


def test_into_dyn_rejects_non_element():
    with pytest.raises(TypeError):
        into_dyn((1, 2))
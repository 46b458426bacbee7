import pytest

from plotweave.image import BitMapElement


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def blit_bitmap(self, pos, size, buffer):
        self.calls.append((pos, size, buffer))


def test_new_element_has_zeroed_buffer_of_right_length():
    element = BitMapElement((1, 2), (4, 3))
    assert len(element.buffer) == 4 * 3 * element.pixel_size
    assert set(element.buffer) == {0}


def test_custom_pixel_size():
    element = BitMapElement((0, 0), (2, 2), pixel_size=4)
    assert len(element.buffer) == 2 * 2 * 4


def test_with_buffer_too_short_raises():
    with pytest.raises(ValueError):
        BitMapElement.with_buffer((0, 0), (2, 2), bytes(11))


def test_with_buffer_longer_is_accepted():
    data = bytes(range(20))
    element = BitMapElement.with_buffer((0, 0), (2, 2), data)
    assert element.buffer == data


def test_negative_size_raises():
    with pytest.raises(ValueError):
        BitMapElement((0, 0), (-1, 2))


def test_copy_to_shares_pixels():
    data = bytearray(12)
    element = BitMapElement.with_buffer((0, 0), (2, 2), data)
    copy = element.copy_to((5, 6))
    data[0] = 200
    assert copy.buffer[0] == 200
    assert list(copy.point_iter()) == [(5, 6)]
    assert list(element.point_iter()) == [(0, 0)]
    assert copy.size == element.size


def test_move_to_changes_position():
    element = BitMapElement((0, 0), (1, 1))
    element.move_to((7, 8))
    assert list(element.point_iter()) == [(7, 8)]


def test_draw_blits_buffer_at_point():
    data = bytes(range(12))
    element = BitMapElement.with_buffer((0, 0), (2, 2), data)
    backend = RecordingBackend()
    element.draw(iter([(30, 40)]), backend, (100, 100))
    assert backend.calls == [((30, 40), (2, 2), data)]


def test_draw_without_points_does_nothing():
    element = BitMapElement((0, 0), (1, 1))
    backend = RecordingBackend()
    element.draw(iter([]), backend, (100, 100))
    assert backend.calls == []
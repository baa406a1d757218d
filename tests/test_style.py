import pytest

from slideview.style import Style, StyleBit


def test_empty_style_has_no_shift():
    assert Style("plain").origin_shift() == (0, 0)


def test_empty_style_keeps_size():
    assert Style().extend_size(40, 12) == (40, 12)


def test_origin_shift_compensates_negative_offsets():
    style = Style("shadow")
    style.add_bit(-2, 1)
    style.add_bit(3, -4)
    assert style.origin_shift() == (2, 4)


def test_positive_offsets_need_no_shift():
    style = Style()
    style.add_bit(1, 2)
    style.add_bit(5, 7)
    assert style.origin_shift() == (0, 0)


def test_extend_size_adds_spread():
    style = Style()
    style.add_bit(-2, 0)
    style.add_bit(3, 0)
    style.add_bit(0, -1)
    style.add_bit(0, 4)
    width, height = style.extend_size(10, 10)
    assert width - 10 == 3 - (-2)
    assert height - 10 == 4 - (-1)


@pytest.mark.parametrize("offsets", [[(1, 1)], [(-1, -1)], [(0, 0), (2, -3)]])
def test_extend_size_never_shrinks(offsets):
    style = Style()
    for x, y in offsets:
        style.add_bit(x, y)
    width, height = style.extend_size(20, 8)
    assert width >= 20 and height >= 8


def test_bit_color_zero_uses_default():
    style = Style()
    bit = style.add_bit(1, 1)
    assert style.bit_color(bit, (10, 20, 30, 255)) == (10, 20, 30, 255)


def test_bit_color_own_color():
    style = Style()
    bit = style.add_bit(0, 0, 1, 2, 3, 4)
    assert style.bit_color(bit, (10, 20, 30, 255)) == (1, 2, 3, 4)


def test_add_bit_appends_in_order():
    style = Style("s")
    first = style.add_bit(1, 0)
    second = style.add_bit(2, 0)
    assert style.bits == [first, second]
    assert first == StyleBit(1, 0)


def test_layers_never_negative():
    style = Style()
    style.add_bit(-3, -5, 9, 9, 9, 9)
    style.add_bit(2, 1)
    for x, y, _ in style.layers(0, 0, (0, 0, 0, 255)):
        assert x >= 0 and y >= 0


def test_layers_colors():
    style = Style()
    style.add_bit(0, 0, 9, 8, 7, 6)
    style.add_bit(1, 1)
    colors = [c for _, _, c in style.layers(0, 0, (1, 1, 1, 1))]
    assert colors == [(9, 8, 7, 6), (1, 1, 1, 1)]
import pytest

from chartspec.services import ColorAssigner, get_palette, scatter_radius


def test_color_index_wraps_palette():
    colors = ColorAssigner(["a", "b", "c"])
    assert colors.color_index(0) == "a"
    assert colors.color_index(4) == "b"
    assert colors.color_first_n(5) == ["a", "b", "c", "a", "b"]
    assert colors.color_repeat(1, 3) == ["b", "b", "b"]
    assert colors.color_first_n(0) == []


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        ColorAssigner([])


def test_get_palette_known_and_unknown():
    assert get_palette("tab10")[0] == "#1f77b4"
    with pytest.raises(ValueError):
        get_palette("rainbow")


def test_radius_small_range_is_offset():
    assert scatter_radius(30, 0, 40) == 34
    assert scatter_radius(12, 10, 20) == 6


def test_radius_wide_range_is_scaled():
    assert scatter_radius(30, 0, 100) == 19
    assert scatter_radius(0, 0, 100) == 4
    assert scatter_radius(100, 0, 100) == 54


def test_radius_equal_bounds_does_not_divide():
    assert scatter_radius(5, 5, 5) == 4


def test_radius_monotonic_for_wide_columns():
    radii = [scatter_radius(x, -20, 180) for x in range(-20, 181, 10)]
    assert radii == sorted(radii)

import pytest

from tag_cloud_generator.fonts import MAXFONT, MINFONT, font_size


def test_boundaries_map_to_font_limits():
    assert font_size(2, 2, 9) == MINFONT == 11
    assert font_size(9, 2, 9) == MAXFONT == 48


def test_equal_counts_use_minimum_font():
    assert font_size(3, 3, 3) == 11
    assert font_size(0, 0, 0) == 11


def test_intermediate_sizes_truncate():
    # 37 * 1 / 3 = 12.33 -> 12
    assert font_size(2, 1, 4) == 23
    # 37 * 2 / 3 = 24.67 -> 24
    assert font_size(3, 1, 4) == 35


def test_custom_font_range():
    assert font_size(5, 0, 10, min_font=10, max_font=20) == 15


def test_inverted_font_range_is_rejected():
    with pytest.raises(ValueError):
        font_size(1, 0, 2, min_font=30, max_font=20)

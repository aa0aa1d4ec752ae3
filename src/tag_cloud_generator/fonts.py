from __future__ import annotations

MINFONT = 11
MAXFONT = 48


def font_size(
    count: int,
    min_count: int,
    max_count: int,
    min_font: int = MINFONT,
    max_font: int = MAXFONT,
) -> int:
    """
    Map ``count`` linearly onto ``[min_font, max_font]``.

    The least frequent selected word maps to ``min_font`` and the most frequent
    to ``max_font``; intermediate sizes are truncated. When every selected word
    has the same count there is nothing to scale and ``min_font`` is returned.
    """
    if min_font > max_font:
        raise ValueError(f"min_font {min_font} exceeds max_font {max_font}.")
    if max_count == min_count:
        return min_font
    numerator = (max_font - min_font) * (count - min_count)
    return numerator // (max_count - min_count) + min_font

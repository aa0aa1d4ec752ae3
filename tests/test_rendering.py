from tag_cloud_generator.config import DEFAULT_STYLESHEET_URL, TagCloudConfig
from tag_cloud_generator.models import RankedEntry, SelectedSubset
from tag_cloud_generator.rendering import render_tag_cloud


def _subset() -> SelectedSubset:
    return SelectedSubset(
        entries=(RankedEntry("cat", 2), RankedEntry("the", 3)),
        min_count=2,
        max_count=3,
    )


def test_render_matches_expected_markup():
    html = render_tag_cloud(
        _subset(), "pets.txt", 2, TagCloudConfig(stylesheet_url="")
    )
    assert html == (
        "<html><head><title>Top 2 words in pets.txt</title></head>\n"
        "<body><h2>Top 2 words in pets.txt</h2><hr></hr>\n"
        '<div class="cdiv">\n'
        '<p class="cbox">\n'
        '<span style="cursor:default" class="f11" title="count: 2">cat</span>\n'
        '<span style="cursor:default" class="f48" title="count: 3">the</span>\n'
        "</p></div></body></html>\n"
    )


def test_render_links_default_stylesheet():
    html = render_tag_cloud(_subset(), "pets.txt", 2)
    assert f'<link href="{DEFAULT_STYLESHEET_URL}" rel="stylesheet" type="text/css">' in html


def test_header_uses_clamped_count():
    html = render_tag_cloud(SelectedSubset(), "empty.txt", 5)
    assert "<h2>Top 0 words in empty.txt</h2>" in html
    assert '<p class="cbox">\n</p></div></body></html>' in html
    assert "<span" not in html


def test_words_are_verbatim_unless_escaping_enabled():
    subset = SelectedSubset(entries=(RankedEntry("a<b", 1),), min_count=1, max_count=1)
    raw = render_tag_cloud(subset, "R&D", 1)
    assert ">a<b</span>" in raw
    assert "Top 1 words in R&D" in raw

    escaped = render_tag_cloud(subset, "R&D", 1, TagCloudConfig(escape_html=True))
    assert ">a&lt;b</span>" in escaped
    assert "Top 1 words in R&amp;D" in escaped


def test_render_honours_configured_font_range():
    config = TagCloudConfig(min_font=8, max_font=20, stylesheet_url="")
    html = render_tag_cloud(_subset(), "pets.txt", 2, config)
    assert 'class="f8"' in html
    assert 'class="f20"' in html

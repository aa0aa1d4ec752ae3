from __future__ import annotations

import html
from typing import List

from .config import TagCloudConfig
from .fonts import font_size
from .models import RankedEntry, SelectedSubset


def render_tag_cloud(
    subset: SelectedSubset,
    title: str,
    requested_count: int,
    config: TagCloudConfig | None = None,
) -> str:
    """Render the selected words as a complete HTML tag cloud page."""
    cfg = config or TagCloudConfig()
    shown = min(requested_count, len(subset))
    heading = f"Top {shown} words in {_text(title, cfg)}"

    lines: List[str] = [
        f"<html><head><title>{heading}</title>{_stylesheet_link(cfg)}</head>",
        f"<body><h2>{heading}</h2><hr></hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for entry in subset:
        lines.append(_word_span(entry, subset, cfg))
    lines.append("</p></div></body></html>")
    return "\n".join(lines) + "\n"


def _word_span(entry: RankedEntry, subset: SelectedSubset, cfg: TagCloudConfig) -> str:
    size = font_size(
        entry.count,
        subset.min_count,
        subset.max_count,
        min_font=cfg.min_font,
        max_font=cfg.max_font,
    )
    return (
        f'<span style="cursor:default" class="f{size}" '
        f'title="count: {entry.count}">{_text(entry.word, cfg)}</span>'
    )


def _stylesheet_link(cfg: TagCloudConfig) -> str:
    if not cfg.stylesheet_url:
        return ""
    href = html.escape(cfg.stylesheet_url, quote=True)
    return f'<link href="{href}" rel="stylesheet" type="text/css">'


def _text(value: str, cfg: TagCloudConfig) -> str:
    # Words are emitted verbatim unless escaping is enabled.
    return html.escape(value, quote=True) if cfg.escape_html else value

from __future__ import annotations

import logging

from .config import TagCloudConfig
from .frequencies import build_frequency_table
from .models import TagCloud
from .ranking import select_top_words, validate_count
from .rendering import render_tag_cloud
from .separators import SeparatorSet

LOGGER = logging.getLogger(__name__)


def generate_tag_cloud(
    text: str,
    requested_count: int,
    title: str,
    config: TagCloudConfig | None = None,
) -> TagCloud:
    """Run the full text -> frequencies -> ranking -> HTML pipeline."""
    cfg = config or TagCloudConfig()
    validate_count(requested_count)

    separators = SeparatorSet.from_string(cfg.separators)
    table = build_frequency_table(text, separators)
    if not table:
        LOGGER.warning("Document %r contains no words; rendering an empty cloud.", title)

    subset = select_top_words(table, requested_count)
    html_text = render_tag_cloud(subset, title, requested_count, cfg)
    LOGGER.info(
        "Rendered %d of %d distinct words from %r (counts %d-%d).",
        len(subset),
        len(table),
        title,
        subset.min_count,
        subset.max_count,
    )
    return TagCloud(
        html=html_text,
        requested_count=requested_count,
        title=title,
        subset=subset,
    )

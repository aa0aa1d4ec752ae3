"""
tag_cloud_generator package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TagCloudConfig, config_from_dict, config_from_yaml, load_config
from .fonts import MAXFONT, MINFONT, font_size
from .frequencies import build_frequency_table
from .models import RankedEntry, SelectedSubset, TagCloud, Token
from .pipeline import generate_tag_cloud
from .ranking import InvalidCountError, select_top_words
from .rendering import render_tag_cloud
from .separators import DEFAULT_SEPARATORS, SeparatorSet, default_separators
from .tokenization import iter_runs, next_run

__all__ = [
    "TagCloudConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "MAXFONT",
    "MINFONT",
    "font_size",
    "build_frequency_table",
    "RankedEntry",
    "SelectedSubset",
    "TagCloud",
    "Token",
    "generate_tag_cloud",
    "InvalidCountError",
    "select_top_words",
    "render_tag_cloud",
    "DEFAULT_SEPARATORS",
    "SeparatorSet",
    "default_separators",
    "iter_runs",
    "next_run",
]

__version__ = "0.1.0"

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .fonts import MAXFONT, MINFONT
from .separators import DEFAULT_SEPARATORS

DEFAULT_STYLESHEET_URL = (
    "http://cse.osu.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css"
)


@dataclass(slots=True)
class TagCloudConfig:
    """Configuration options for tag cloud generation."""

    min_font: int = MINFONT
    max_font: int = MAXFONT
    separators: str = DEFAULT_SEPARATORS
    stylesheet_url: str = DEFAULT_STYLESHEET_URL
    escape_html: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.min_font > self.max_font:
            raise ValueError(
                f"min_font {self.min_font} exceeds max_font {self.max_font}."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TagCloudConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> TagCloudConfig:
    """Build a TagCloudConfig from a dictionary-like input."""
    if data is None:
        return TagCloudConfig()
    return TagCloudConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TagCloudConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TagCloudConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TagCloudConfig()
    return config_from_yaml(path)

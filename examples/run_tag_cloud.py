"""
Tiny helper script that renders a tag cloud from an inline passage.
Pass an output path to save the HTML instead of printing it.
"""

from __future__ import annotations

import sys
from pathlib import Path

from tag_cloud_generator import TagCloudConfig, generate_tag_cloud


def main() -> None:
    text = (
        "The storm clouds rolled over the bay. Sailors watched the winds, "
        "and the captain watched the sailors. The storm did not break."
    )
    config = TagCloudConfig(escape_html=True)
    cloud = generate_tag_cloud(text, 8, "harbor sample", config)

    for entry in cloud.subset:
        print(f"{entry.word:<12} {entry.count}")

    if len(sys.argv) > 1:
        Path(sys.argv[1]).write_text(cloud.html, encoding=config.encoding)
    else:
        print(cloud.html)


if __name__ == "__main__":
    main()

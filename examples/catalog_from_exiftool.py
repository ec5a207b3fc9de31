"""
Example: Build a metadata catalog from exiftool output

Run exiftool over a folder first:

    exiftool -G -json -r ~/Pictures/2017 > tags.json

then derive one canonical record per file:

    python examples/catalog_from_exiftool.py tags.json
"""

import json
import logging
import sys
from pathlib import Path

from media_metadata import derive_catalog, get_deriver_options, load_config


def main():
    """Derive metadata for every file in an exiftool JSON dump."""

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 2:
        print("Usage: python catalog_from_exiftool.py tags.json [config.yaml]")
        return

    tags_path = Path(sys.argv[1])
    with open(tags_path, "r", encoding="utf-8") as f:
        exiftool_output = json.load(f)

    # Options are optional; fall back to defaults without a config file
    try:
        config_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None
        options = get_deriver_options(load_config(config_path))
    except FileNotFoundError:
        options = None

    df = derive_catalog(((tags, None) for tags in exiftool_output), options)

    print(f"Derived metadata for {len(df)} files")
    if not df.empty:
        print(df[["source_file", "date", "video", "caption", "rating"]].head(20))


if __name__ == "__main__":
    main()

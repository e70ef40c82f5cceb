#!/usr/bin/env python3
"""
Generate a large synthetic mock tree for load testing.

Default: 500 folders x 12 files under mocks/personal-loan/.
Afterwards run scripts/aggregate_mocks.py and check the catalog size, then start
the stub server and watch loading time, memory use and response times.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add repo root to path so `api_virtualization.*` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from api_virtualization.catalog.synthetic import API_ENDPOINTS, generate_synthetic_mocks


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate synthetic personal-loan mock files")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("mocks/personal-loan"),
        help="Output directory (default: mocks/personal-loan)",
    )
    parser.add_argument("--folders", type=int, default=500, help="Number of folders (default: 500)")
    parser.add_argument(
        "--files-per-folder",
        type=int,
        default=len(API_ENDPOINTS),
        help=f"Files per folder, at most {len(API_ENDPOINTS)} (default: {len(API_ENDPOINTS)})",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    logger.info(
        "Generating %d folders with %d JSON files each...", args.folders, args.files_per_folder
    )
    try:
        total = generate_synthetic_mocks(args.output_dir, args.folders, args.files_per_folder)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.info("Generated %d files under %s", total, args.output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Aggregate every mock definition under mocks/ into a single catalog.

Outputs:
- mocks.json (version, generatedAt, totalMocks and sanitized mocks)

The catalog is AUTO-GENERATED: edit the files under mocks/ instead.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Add repo root to path so `api_virtualization.*` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from api_virtualization.catalog.aggregator import aggregate_mocks
from api_virtualization.utils.config_loader import load_virtualization_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Aggregate mock JSON files into mocks.json")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML file (default: config/virtualization_config.yml)",
    )
    parser.add_argument("--mocks-dir", type=Path, default=None, help="Mocks root directory (default: from config)")
    parser.add_argument("--output", type=Path, default=None, help="Catalog output file (default: from config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_virtualization_config(args.config)
        mocks_dir: Path = args.mocks_dir or Path(config.mocks.root_dir)
        output_path: Optional[Path] = args.output or Path(config.mocks.output_file)

        result = aggregate_mocks(mocks_dir, config.mocks.extension)
        for load_error in result.errors:
            logger.error("Skipped %s: %s", load_error.source_file, load_error.error)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(result.output.to_document(), indent=2), encoding="utf-8")

        size_mb = output_path.stat().st_size / 1024 / 1024
        logger.info("Wrote %d mock(s) to %s (%.2f MB)", result.output.total_mocks, output_path, size_mb)
        if size_mb > config.mocks.max_catalog_size_mb:
            logger.warning(
                "Catalog is %.2f MB, above the %.0f MB limit the stub server loads comfortably",
                size_mb,
                config.mocks.max_catalog_size_mb,
            )
        return 1 if result.errors else 0
    except KeyboardInterrupt:
        logger.warning("Aggregation interrupted by user")
        return 130
    except Exception as e:
        logger.error("Error during aggregation: %s: %s", type(e).__name__, str(e), exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

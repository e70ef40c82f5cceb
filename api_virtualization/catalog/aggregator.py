"""
Catalog aggregation pipeline.

Walks a mocks directory, loads and sanitizes each file and assembles the result
into one versioned Catalog. Writing the catalog to disk is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from api_virtualization.utils.timestamps import isoformat_utc, utc_now

from .loader import LoadError, load_mocks
from .models import Catalog
from .walker import find_files

logger = logging.getLogger(__name__)


@dataclass
class AggregationResult:
    output: Catalog
    errors: List[LoadError] = field(default_factory=list)


def build_catalog(entries: List[Dict[str, Any]], generated_at: Optional[datetime] = None) -> Catalog:
    """Combine sanitized entries with run metadata."""
    return Catalog(
        generated_at=isoformat_utc(generated_at or utc_now()),
        total_mocks=len(entries),
        mocks=list(entries),
    )


def aggregate_mocks(mocks_dir: Union[str, Path], extension: str = ".json") -> AggregationResult:
    """
    Build the catalog for every mock file under ``mocks_dir``.

    Raises:
        FileNotFoundError / NotADirectoryError: If mocks_dir is unusable
        MockParseError: If any discovered file is malformed
    """
    mocks_dir = Path(mocks_dir)
    files = find_files(mocks_dir, extension)
    logger.info("Found %d mock file(s) in %s", len(files), mocks_dir)

    entries, errors = load_mocks(mocks_dir, files)
    catalog = build_catalog(entries)

    logger.info("Aggregated %d mock(s), %d load error(s)", catalog.total_mocks, len(errors))
    return AggregationResult(output=catalog, errors=errors)

"""
Mock loading and sanitization.

Reads mock definition files, strips the heavy response payload fields and stamps
each document with provenance metadata before it goes into the catalog.
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from api_virtualization.utils.timestamps import from_epoch_seconds, isoformat_utc

logger = logging.getLogger(__name__)

STRIPPED_FIELDS = ("responseBody", "responseHeaders")


class MockParseError(ValueError):
    """Raised when a mock file is not a JSON object."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Failed to parse {path}: {message}")
        self.path = path
        self.reason = message


@dataclass
class LoadError:
    source_file: str
    error: str


def read_mock_document(path: Path) -> Dict[str, Any]:
    """
    Read and parse one mock file.

    Raises:
        OSError: If the file can't be read
        MockParseError: If the content is not a JSON object
    """
    content = path.read_bytes()
    try:
        document = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MockParseError(path, str(e)) from e

    if not isinstance(document, dict):
        raise MockParseError(path, f"expected a JSON object, got {type(document).__name__}")
    return document


def relative_source_path(path: Path, root: Path) -> str:
    return Path(path).relative_to(root).as_posix()


def sanitize_mock(document: Dict[str, Any], source_file: str, last_modified: str) -> Dict[str, Any]:
    """Clone ``document`` with response payloads emptied and ``_metadata`` attached."""
    entry = copy.deepcopy(document)
    for field in STRIPPED_FIELDS:
        entry[field] = {}
    entry["_metadata"] = {
        "sourceFile": source_file,
        "lastModified": last_modified,
    }
    return entry


def load_mocks(
    root: Union[str, Path],
    files: Iterable[Path],
) -> Tuple[List[Dict[str, Any]], List[LoadError]]:
    """
    Load and sanitize discovered mock files for aggregation.

    A file that can't be parsed aborts the whole load. Files that can't be read
    are collected as LoadError entries and skipped.

    Returns:
        Tuple of (catalog entries, load errors)
    """
    root = Path(root)
    entries: List[Dict[str, Any]] = []
    errors: List[LoadError] = []

    for path in files:
        source_file = relative_source_path(path, root)
        try:
            document = read_mock_document(path)
            modified = from_epoch_seconds(path.stat().st_mtime)
        except OSError as e:
            logger.warning("Could not load %s: %s", source_file, e)
            errors.append(LoadError(source_file=source_file, error=str(e)))
            continue

        entries.append(sanitize_mock(document, source_file, isoformat_utc(modified)))
        logger.debug("Loaded %s", source_file)

    return entries, errors

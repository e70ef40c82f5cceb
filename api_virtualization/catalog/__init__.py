"""
Mock catalog pipeline.

Discovery (walker) -> load & sanitize (loader) -> assemble (aggregator), plus
the schema validator used by the validation-only run.
"""

from .aggregator import AggregationResult, aggregate_mocks, build_catalog
from .loader import LoadError, MockParseError, load_mocks, read_mock_document, sanitize_mock
from .models import Catalog
from .validator import (
    DuplicateMock,
    ValidationReport,
    ValidationResult,
    check_naming_conventions,
    find_duplicate_mocks,
    validate_mock_schema,
    validate_mock_tree,
)
from .walker import find_files

__all__ = [
    "AggregationResult",
    "Catalog",
    "DuplicateMock",
    "LoadError",
    "MockParseError",
    "ValidationReport",
    "ValidationResult",
    "aggregate_mocks",
    "build_catalog",
    "check_naming_conventions",
    "find_duplicate_mocks",
    "find_files",
    "load_mocks",
    "read_mock_document",
    "sanitize_mock",
    "validate_mock_schema",
    "validate_mock_tree",
]

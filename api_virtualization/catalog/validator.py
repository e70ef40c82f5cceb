"""
Mock definition schema validation.

Validation never raises and never stops at the first problem: every rule is
checked and reported as an error (the mock is unusable) or a warning (the mock
works but relies on a default).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, List, Tuple, Union

from api_virtualization.functions.registry import available_function_names

from .loader import MockParseError, read_mock_document, relative_source_path
from .walker import find_files

logger = logging.getLogger(__name__)

VALID_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599
MAX_LATENCY_MS = 30000
INLINE_FUNCTION_MARKERS = ("function", "=>")
KEBAB_CASE_NAME = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*(_\d+)?$")


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class DuplicateMock:
    first_file: str
    duplicate_file: str
    api_name: Any

    def describe(self) -> str:
        return f"Duplicate mock for {self.api_name}:\n  - {self.first_file}\n  - {self.duplicate_file}"


@dataclass
class FileValidationResult:
    source_file: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class ValidationReport:
    files: List[FileValidationResult] = field(default_factory=list)
    duplicates: List[DuplicateMock] = field(default_factory=list)
    naming_warnings: List[str] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def valid_count(self) -> int:
        return sum(1 for result in self.files if not result.errors and not result.warnings)

    @property
    def total_errors(self) -> int:
        return sum(len(result.errors) for result in self.files) + len(self.duplicates)

    @property
    def total_warnings(self) -> int:
        return sum(len(result.warnings) for result in self.files) + len(self.naming_warnings)

    @property
    def has_errors(self) -> bool:
        return self.total_errors > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "validCount": self.valid_count,
            "totalErrors": self.total_errors,
            "totalWarnings": self.total_warnings,
            "files": [
                {"sourceFile": r.source_file, "errors": r.errors, "warnings": r.warnings}
                for r in self.files
            ],
            "duplicates": [
                {"apiName": d.api_name, "files": [d.first_file, d.duplicate_file]}
                for d in self.duplicates
            ],
            "namingWarnings": self.naming_warnings,
        }


def _is_set(value: Any) -> bool:
    """JSON truthiness: empty objects and arrays count as set, null/""/false/0 don't."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_predicate(predicate: Any, result: ValidationResult) -> None:
    if not isinstance(predicate, dict):
        result.errors.append("predicate must be an object")
        return
    if not isinstance(predicate.get("request"), dict):
        result.errors.append("predicate.request must be an object")
    for key in ("headers", "query"):
        if key in predicate and not isinstance(predicate[key], dict):
            result.errors.append(f"predicate.{key} must be an object (if provided)")


def validate_mock_schema(mock: Dict[str, Any]) -> ValidationResult:
    """
    Validate one mock definition document.

    Returns:
        ValidationResult with every error and warning found
    """
    result = ValidationResult()
    if not isinstance(mock, dict):
        result.errors.append("Mock definition must be a JSON object")
        return result

    api_name = mock.get("apiName")
    if not isinstance(api_name, str) or not api_name.strip():
        result.errors.append("Missing or invalid required field: apiName")

    if not _is_set(mock.get("responseBody")) and not _is_set(mock.get("responseFunction")):
        result.errors.append("Must have either responseBody or responseFunction")

    method = mock.get("method")
    if _is_set(method):
        if method not in VALID_METHODS:
            result.errors.append(f"Invalid method: {method}. Must be one of {', '.join(VALID_METHODS)}")
    else:
        result.warnings.append("Method not specified, will default to POST")

    if "statusCode" in mock:
        status_code = mock["statusCode"]
        if not _is_number(status_code) or not MIN_STATUS_CODE <= status_code <= MAX_STATUS_CODE:
            result.errors.append(
                f"statusCode must be a number between {MIN_STATUS_CODE} and {MAX_STATUS_CODE}"
            )

    if "latencyMs" in mock:
        latency = mock["latencyMs"]
        if not _is_number(latency) or not 0 <= latency <= MAX_LATENCY_MS:
            result.errors.append(f"latencyMs must be a number between 0 and {MAX_LATENCY_MS}")

    predicate = mock.get("predicate")
    if not _is_set(predicate):
        result.warnings.append("No predicate specified, will match any request")
    else:
        _check_predicate(predicate, result)

    if "responseHeaders" in mock and not isinstance(mock["responseHeaders"], dict):
        result.errors.append("responseHeaders must be an object (not an array)")

    if "businessName" in mock:
        business_name = mock["businessName"]
        if not isinstance(business_name, str) or not business_name.strip():
            result.errors.append("businessName must be a non-empty string")

    function_name = mock.get("responseFunction")
    if isinstance(function_name, str) and function_name:
        is_inline = any(marker in function_name for marker in INLINE_FUNCTION_MARKERS)
        available = available_function_names()
        if not is_inline and function_name not in available:
            result.errors.append(
                f"responseFunction '{function_name}' is not a registered response function. "
                f"Available: {', '.join(available)}"
            )

    return result


def _predicate_key(mock: Dict[str, Any]) -> Tuple[str, str]:
    predicate = mock.get("predicate")
    if not _is_set(predicate):
        predicate = {}
    serialized = json.dumps(predicate, sort_keys=True, separators=(",", ":"), default=str)
    return json.dumps(mock.get("apiName"), default=str), serialized


def find_duplicate_mocks(documents: Iterable[Tuple[str, Dict[str, Any]]]) -> List[DuplicateMock]:
    """
    Report mocks sharing the same apiName and predicate.

    The first file seen for a key owns it; each later file is reported against it.
    """
    seen: Dict[Tuple[str, str], str] = {}
    duplicates: List[DuplicateMock] = []

    for source_file, mock in documents:
        if not isinstance(mock, dict):
            continue
        key = _predicate_key(mock)
        if key in seen:
            duplicates.append(
                DuplicateMock(first_file=seen[key], duplicate_file=source_file, api_name=mock.get("apiName"))
            )
        else:
            seen[key] = source_file

    return duplicates


def check_naming_conventions(relative_paths: Iterable[str]) -> List[str]:
    """Warnings for file names that aren't kebab-case or example mocks outside the root."""
    warnings: List[str] = []
    for relative_path in relative_paths:
        path = PurePosixPath(relative_path)
        if not KEBAB_CASE_NAME.match(path.stem):
            warnings.append(f"{relative_path}: file name should be kebab-case (optional _<digits> suffix)")
        if path.name.startswith("example-") and str(path.parent) != ".":
            warnings.append(f"{relative_path}: example mocks should live in the mocks root directory")
    return warnings


def validate_mock_tree(mocks_dir: Union[str, Path], extension: str = ".json") -> ValidationReport:
    """
    Validate every mock file under ``mocks_dir``.

    Unlike aggregation, a file that can't be read or parsed is recorded as an
    error for that file and the run continues.

    Raises:
        FileNotFoundError / NotADirectoryError: If mocks_dir is unusable
    """
    mocks_dir = Path(mocks_dir)
    report = ValidationReport()
    parsed: List[Tuple[str, Dict[str, Any]]] = []

    for path in find_files(mocks_dir, extension):
        source_file = relative_source_path(path, mocks_dir)
        try:
            document = read_mock_document(path)
        except (MockParseError, OSError) as e:
            reason = e.reason if isinstance(e, MockParseError) else str(e)
            report.files.append(FileValidationResult(source_file, errors=[f"Invalid JSON - {reason}"]))
            continue

        result = validate_mock_schema(document)
        report.files.append(FileValidationResult(source_file, result.errors, result.warnings))
        parsed.append((source_file, document))

    report.duplicates = find_duplicate_mocks(parsed)
    report.naming_warnings = check_naming_conventions(r.source_file for r in report.files)

    logger.info(
        "Validated %d file(s): %d error(s), %d warning(s)",
        report.total_files,
        report.total_errors,
        report.total_warnings,
    )
    return report

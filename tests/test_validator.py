import pytest

from api_virtualization.catalog.validator import (
    check_naming_conventions,
    find_duplicate_mocks,
    validate_mock_schema,
    validate_mock_tree,
)

from conftest import write_mock

VALID_MOCK = {
    "apiName": "API/LoanStatus",
    "businessName": "Loan status",
    "method": "POST",
    "statusCode": 200,
    "latencyMs": 100,
    "predicate": {"request": {"path": "/loan"}, "headers": {}, "query": {}},
    "responseHeaders": {"Content-Type": "application/json"},
    "responseBody": {"status": "ok"},
}


def test_valid_mock_has_no_findings():
    result = validate_mock_schema(VALID_MOCK)

    assert result.errors == []
    assert result.warnings == []
    assert result.valid


def test_missing_body_and_invalid_method_are_both_reported():
    result = validate_mock_schema({"apiName": "A", "method": "XX"})

    assert len(result.errors) >= 2
    assert "Must have either responseBody or responseFunction" in result.errors
    assert any(error.startswith("Invalid method: XX") for error in result.errors)


@pytest.mark.parametrize("api_name", [None, "", "   ", 42])
def test_api_name_must_be_non_empty_string(api_name):
    mock = dict(VALID_MOCK, apiName=api_name)
    assert "Missing or invalid required field: apiName" in validate_mock_schema(mock).errors


def test_empty_response_body_object_counts_as_present():
    mock = dict(VALID_MOCK, responseBody={})
    assert validate_mock_schema(mock).errors == []


def test_response_function_alone_is_enough():
    mock = {k: v for k, v in VALID_MOCK.items() if k != "responseBody"}
    mock["responseFunction"] = "unreliableService"

    assert validate_mock_schema(mock).errors == []


def test_missing_method_and_predicate_are_warnings():
    result = validate_mock_schema({"apiName": "A", "responseBody": {"x": 1}})

    assert result.errors == []
    assert "Method not specified, will default to POST" in result.warnings
    assert "No predicate specified, will match any request" in result.warnings


@pytest.mark.parametrize("status_code", [99, 600, "200", True, None])
def test_status_code_range(status_code):
    mock = dict(VALID_MOCK, statusCode=status_code)
    assert "statusCode must be a number between 100 and 599" in validate_mock_schema(mock).errors


@pytest.mark.parametrize("latency", [-1, 30001, "10"])
def test_latency_range(latency):
    mock = dict(VALID_MOCK, latencyMs=latency)
    assert "latencyMs must be a number between 0 and 30000" in validate_mock_schema(mock).errors


def test_latency_bounds_are_inclusive():
    assert validate_mock_schema(dict(VALID_MOCK, latencyMs=0)).valid
    assert validate_mock_schema(dict(VALID_MOCK, latencyMs=30000)).valid


def test_predicate_rules_report_each_violation():
    mock = dict(VALID_MOCK, predicate={"headers": "x", "query": []})
    errors = validate_mock_schema(mock).errors

    assert "predicate.request must be an object" in errors
    assert "predicate.headers must be an object (if provided)" in errors
    assert "predicate.query must be an object (if provided)" in errors


def test_predicate_must_be_object():
    errors = validate_mock_schema(dict(VALID_MOCK, predicate="anything")).errors
    assert errors == ["predicate must be an object"]


def test_response_headers_array_is_rejected():
    errors = validate_mock_schema(dict(VALID_MOCK, responseHeaders=["Content-Type"])).errors
    assert "responseHeaders must be an object (not an array)" in errors


@pytest.mark.parametrize("business_name", ["", "  ", 12])
def test_business_name_must_be_non_empty(business_name):
    errors = validate_mock_schema(dict(VALID_MOCK, businessName=business_name)).errors
    assert "businessName must be a non-empty string" in errors


def test_unknown_response_function_lists_available_names():
    errors = validate_mock_schema(dict(VALID_MOCK, responseFunction="doesNotExist")).errors

    assert len(errors) == 1
    assert "doesNotExist" in errors[0]
    assert "journeyBasedResponse" in errors[0]


def test_inline_response_function_is_not_looked_up():
    inline = "function (request) { return {statusCode: 200}; }"
    assert validate_mock_schema(dict(VALID_MOCK, responseFunction=inline)).valid
    assert validate_mock_schema(dict(VALID_MOCK, responseFunction="(req) => ({})")).valid


def test_validator_does_not_raise_on_non_object():
    result = validate_mock_schema(["not", "a", "mock"])
    assert result.errors == ["Mock definition must be a JSON object"]


def test_validator_is_pure():
    mock = {"apiName": "A", "method": "XX", "latencyMs": -5}
    first = validate_mock_schema(mock)
    validate_mock_schema(VALID_MOCK)
    second = validate_mock_schema(mock)

    assert (first.errors, first.warnings) == (second.errors, second.warnings)
    assert mock == {"apiName": "A", "method": "XX", "latencyMs": -5}


def test_duplicates_with_absent_predicate():
    documents = [
        ("a.json", {"apiName": "A", "responseBody": {}}),
        ("b.json", {"apiName": "A", "responseBody": {"other": True}}),
    ]

    duplicates = find_duplicate_mocks(documents)

    assert len(duplicates) == 1
    assert duplicates[0].first_file == "a.json"
    assert duplicates[0].duplicate_file == "b.json"
    assert duplicates[0].api_name == "A"


def test_duplicate_predicates_compare_independent_of_key_order():
    documents = [
        ("a.json", {"apiName": "A", "predicate": {"request": {"x": 1, "y": 2}}}),
        ("b.json", {"apiName": "A", "predicate": {"request": {"y": 2, "x": 1}}}),
        ("c.json", {"apiName": "A", "predicate": {"request": {"x": 2}}}),
        ("d.json", {"apiName": "B", "predicate": {"request": {"x": 1, "y": 2}}}),
    ]

    duplicates = find_duplicate_mocks(documents)

    assert [(d.first_file, d.duplicate_file) for d in duplicates] == [("a.json", "b.json")]


def test_every_later_duplicate_is_reported_against_first():
    documents = [(f"{n}.json", {"apiName": "A"}) for n in ("a", "b", "c")]

    duplicates = find_duplicate_mocks(documents)

    assert [(d.first_file, d.duplicate_file) for d in duplicates] == [("a.json", "b.json"), ("a.json", "c.json")]


def test_naming_conventions():
    warnings = check_naming_conventions([
        "example-loan.json",
        "journey/dropoff-update_2.json",
        "journey/DropOff.json",
        "nested/example-auth.json",
    ])

    assert len(warnings) == 2
    assert any(w.startswith("journey/DropOff.json") for w in warnings)
    assert any(w.startswith("nested/example-auth.json") for w in warnings)


def test_validate_tree_collects_parse_errors_and_continues(mocks_dir):
    write_mock(mocks_dir, "broken.json", "{not json")

    report = validate_mock_tree(mocks_dir)

    assert report.total_files == 4
    broken = next(r for r in report.files if r.source_file == "broken.json")
    assert broken.errors[0].startswith("Invalid JSON - ")
    assert report.has_errors
    assert report.total_errors == 1


def test_validate_tree_reports_duplicates_as_errors(mocks_dir):
    write_mock(mocks_dir, "copy/otp-generation-copy.json", {
        "apiName": "API/PersonalLoan_OTPGeneration",
        "method": "POST",
        "predicate": {"request": {"path": "/otp"}, "headers": {}, "query": {}},
        "responseBody": {},
    })

    report = validate_mock_tree(mocks_dir)

    assert len(report.duplicates) == 1
    assert report.duplicates[0].first_file == "copy/otp-generation-copy.json"
    assert report.has_errors


def test_warnings_alone_do_not_fail_the_tree(tmp_path):
    write_mock(tmp_path, "bare-mock.json", {"apiName": "A", "responseBody": {"ok": True}})

    report = validate_mock_tree(tmp_path)

    assert not report.has_errors
    assert report.total_warnings == 2
    assert report.valid_count == 0


def test_validate_tree_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_mock_tree(tmp_path / "missing")


def test_report_to_dict(mocks_dir):
    data = validate_mock_tree(mocks_dir).to_dict()

    assert data["totalFiles"] == 3
    assert data["totalErrors"] == 0
    assert {f["sourceFile"] for f in data["files"]} >= {"example-auth.json"}

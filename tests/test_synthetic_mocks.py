import json

import pytest

from api_virtualization.catalog.aggregator import aggregate_mocks
from api_virtualization.catalog.synthetic import API_ENDPOINTS, build_synthetic_mock, generate_synthetic_mocks
from api_virtualization.catalog.validator import validate_mock_tree


def test_build_synthetic_mock_customizes_fields():
    mock = build_synthetic_mock(7, 3)

    assert mock["apiName"] == "API/PersonalLoan_FetchOffers_7"
    assert mock["businessName"] == "FetchOffers - Folder 7"
    assert mock["responseBody"]["responseString"]["acknowledgementId"] == "TEST7003"
    assert mock["responseBody"]["responseString"]["loanAmount"] == 107300
    assert mock["responseBody"]["TransactionId"] == "TXN_TEST_7_3"


def test_generated_tree_is_valid_and_aggregates(tmp_path):
    total = generate_synthetic_mocks(tmp_path, folders=3, files_per_folder=len(API_ENDPOINTS))

    assert total == 36
    assert (tmp_path / "test-folder-2" / "otpgeneration-2.json").exists()

    report = validate_mock_tree(tmp_path)
    assert not report.has_errors
    assert report.duplicates == []
    assert report.naming_warnings == []

    result = aggregate_mocks(tmp_path)
    assert result.output.total_mocks == 36
    assert result.errors == []


def test_generated_file_is_indented_json(tmp_path):
    generate_synthetic_mocks(tmp_path, folders=1, files_per_folder=1)
    content = (tmp_path / "test-folder-1" / "otpgeneration-1.json").read_text(encoding="utf-8")

    assert content.startswith("{\n  ")
    assert json.loads(content)["apiName"] == "API/PersonalLoan_OTPGeneration_1"


def test_too_many_files_per_folder(tmp_path):
    with pytest.raises(ValueError):
        generate_synthetic_mocks(tmp_path, folders=1, files_per_folder=len(API_ENDPOINTS) + 1)

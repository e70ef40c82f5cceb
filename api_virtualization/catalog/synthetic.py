"""
Synthetic mock tree generator.

Produces a large tree of personal-loan mocks (one folder per "journey", one
file per endpoint) for load testing the stub server and the aggregation step.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

API_ENDPOINTS = (
    "OTPGeneration",
    "OTPValidation",
    "FetchDemographics",
    "FetchOffers",
    "ApplyForLoan",
    "GetBureauOffer",
    "InitiateEKYC",
    "GetEKYCStatus",
    "AccountSelection",
    "LoanStatusEnquiry",
    "InitiateIncomeUpload",
    "ActionStatusInquiry",
)

BASE_MOCK: Dict[str, Any] = {
    "businessName": "Personal Loan Test Mock",
    "apiName": "API/PersonalLoan_TestAPI",
    "method": "POST",
    "latencyMs": 0,
    "predicate": {"request": {}, "headers": {}, "query": {}},
    "responseHeaders": {"Content-Type": "application/json"},
    "responseBody": {
        "Status": "SUCCESS",
        "ResponseSignatureEncryptedValue": None,
        "Scope": None,
        "responseString": {
            "loanAmount": 500000,
            "interestRate": 10.5,
            "tenure": 36,
            "acknowledgementId": "TEST12345",
            "status": "APPROVED",
        },
        "errorMessage": None,
        "contextParam": {
            "bankJourneyID": "TEST_JOURNEY_ID",
            "partnerJourneyID": "test-uuid",
            "partnerID": "HDFCBANK",
            "channelID": "ADOBE",
            "productName": "PL",
        },
        "errorCode": None,
        "originMessage": None,
        "originCode": None,
        "status": {"errorDesc": "", "errorCode": "", "responseCode": "0"},
        "TransactionId": "TXN_TEST_ID",
    },
}


def build_synthetic_mock(folder_num: int, file_num: int) -> Dict[str, Any]:
    endpoint = API_ENDPOINTS[file_num % len(API_ENDPOINTS)]
    mock = copy.deepcopy(BASE_MOCK)

    mock["businessName"] = f"{endpoint} - Folder {folder_num}"
    mock["apiName"] = f"API/PersonalLoan_{endpoint}_{folder_num}"
    body = mock["responseBody"]
    body["responseString"]["acknowledgementId"] = f"TEST{folder_num}{file_num:03d}"
    body["responseString"]["loanAmount"] = 100000 + folder_num * 1000 + file_num * 100
    body["contextParam"]["bankJourneyID"] = f"TEST_JOURNEY_{folder_num}_{file_num}"
    body["contextParam"]["partnerJourneyID"] = f"test-uuid-{folder_num}-{file_num}"
    body["TransactionId"] = f"TXN_TEST_{folder_num}_{file_num}"
    return mock


def generate_synthetic_mocks(
    output_dir: Union[str, Path],
    folders: int = 500,
    files_per_folder: int = 12,
) -> int:
    """
    Write ``folders`` x ``files_per_folder`` mock files under ``output_dir``.

    Returns:
        Number of files written
    """
    if files_per_folder > len(API_ENDPOINTS):
        raise ValueError(f"files_per_folder can't exceed {len(API_ENDPOINTS)} endpoints")

    output_dir = Path(output_dir)
    total_files = 0

    for folder_num in range(1, folders + 1):
        folder_path = output_dir / f"test-folder-{folder_num}"
        folder_path.mkdir(parents=True, exist_ok=True)

        for file_num in range(files_per_folder):
            endpoint = API_ENDPOINTS[file_num]
            file_path = folder_path / f"{endpoint.lower()}-{folder_num}.json"
            mock = build_synthetic_mock(folder_num, file_num)
            file_path.write_text(json.dumps(mock, indent=2), encoding="utf-8")
            total_files += 1

        if folder_num % 50 == 0:
            logger.info("Generated %d/%d folders (%d files)", folder_num, folders, total_files)

    return total_files

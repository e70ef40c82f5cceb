"""
Catalog contracts.

The catalog is the single document the stub server loads at startup. Entries
are kept as plain dicts because aggregation does not validate mock fields.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

CATALOG_VERSION = "1.0.0"
CATALOG_COMMENT = (
    "AUTO-GENERATED FILE - DO NOT EDIT MANUALLY. "
    "Edit the files under mocks/ and re-run scripts/aggregate_mocks.py."
)


class Catalog(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: str = CATALOG_VERSION
    generated_at: str = Field(alias="generatedAt")
    comment: str = Field(default=CATALOG_COMMENT, alias="_comment")
    total_mocks: int = Field(alias="totalMocks", ge=0)
    mocks: List[Dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_total(self) -> "Catalog":
        if self.total_mocks != len(self.mocks):
            raise ValueError(
                f"totalMocks ({self.total_mocks}) does not match number of mocks ({len(self.mocks)})"
            )
        return self

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

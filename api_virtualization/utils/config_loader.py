"""
Configuration loader for API virtualization.

This module loads config/virtualization_config.yml and validates it with Pydantic.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_BASE_URL = "https://main--api-virtualization--hdfc-forms.aem.page/responses"
DEFAULT_MAX_TRACKED_IDS = 10000


class MocksConfig(BaseModel):
    """Mock discovery and catalog output settings"""

    root_dir: str = "mocks"
    extension: str = ".json"
    output_file: str = "mocks.json"
    max_catalog_size_mb: float = Field(default=10.0, gt=0)


class JourneyConfig(BaseModel):
    """Settings for the journey correlator"""

    remote_base_url: str = DEFAULT_REMOTE_BASE_URL
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
    max_tracked_ids: Optional[int] = Field(default=DEFAULT_MAX_TRACKED_IDS, ge=1)


class VirtualizationConfig(BaseModel):
    mocks: MocksConfig = Field(default_factory=MocksConfig)
    journey: JourneyConfig = Field(default_factory=JourneyConfig)


def default_config_path() -> Path:
    return Path(__file__).parent.parent.parent / "config" / "virtualization_config.yml"


def load_virtualization_config(config_path: Optional[Path] = None) -> VirtualizationConfig:
    """
    Load and validate virtualization configuration from YAML file.

    Environment variables win over file values:
    - MOCKS_DIR overrides mocks.root_dir
    - JOURNEY_REMOTE_BASE_URL overrides journey.remote_base_url

    Args:
        config_path: Path to config file. Defaults to config/virtualization_config.yml

    Returns:
        Validated VirtualizationConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Virtualization config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    mocks_dir = os.getenv("MOCKS_DIR")
    if mocks_dir:
        config_data.setdefault("mocks", {})["root_dir"] = mocks_dir
    remote_base_url = os.getenv("JOURNEY_REMOTE_BASE_URL")
    if remote_base_url:
        config_data.setdefault("journey", {})["remote_base_url"] = remote_base_url

    try:
        config = VirtualizationConfig(**config_data)
        logger.info(f"Successfully loaded virtualization config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Virtualization config validation failed: {e}")
        raise

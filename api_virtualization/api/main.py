"""
FastAPI application - development harness.

Lets developers call response functions and validate the mocks tree from
Swagger without starting the stub server. It does no predicate matching.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import Response

from api_virtualization import __version__
from api_virtualization.catalog.validator import validate_mock_tree
from api_virtualization.contracts import StubRequest
from api_virtualization.functions.journey import JourneyCorrelator, JourneyStore
from api_virtualization.functions.registry import (
    ResponseFunctionRegistry,
    UnknownResponseFunctionError,
    available_function_names,
)
from api_virtualization.utils.config_loader import VirtualizationConfig, load_virtualization_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _load_config() -> VirtualizationConfig:
    try:
        return load_virtualization_config()
    except FileNotFoundError as e:
        logger.warning("%s; using default settings", e)
        return VirtualizationConfig()


def build_registry(config: VirtualizationConfig) -> ResponseFunctionRegistry:
    journey = JourneyCorrelator(
        store=JourneyStore(max_tracked_ids=config.journey.max_tracked_ids),
        remote_base_url=config.journey.remote_base_url,
        timeout_seconds=config.journey.fetch_timeout_seconds,
    )
    return ResponseFunctionRegistry(journey=journey)


config = _load_config()
registry = build_registry(config)

app = FastAPI(
    title="API Virtualization Harness",
    description="Try response functions and validate mock definitions",
    version=__version__,
)


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "version": __version__, "functions": len(available_function_names())}


@app.get("/api/v1/functions", tags=["Response Functions"])
async def list_functions():
    return {"functions": available_function_names()}


@app.post("/api/v1/functions/{name}", tags=["Response Functions"])
async def invoke_function(
    name: str,
    request: Request,
    path: Optional[str] = Query(default=None, description="Request path seen by the stub server"),
):
    """
    Invoke a response function with the raw request body and headers.

    Example: POST /api/v1/functions/journeyBasedResponse?path=/api/DropOffUpdate
    with body {"journeyId": "J1"}
    """
    raw_body = (await request.body()).decode("utf-8")
    stub_request = StubRequest(body=raw_body, headers=dict(request.headers), path=path or "")

    try:
        result = await registry.invoke(name, stub_request)
    except UnknownResponseFunctionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(content=result.body, status_code=result.status_code, headers=result.headers)


@app.post("/api/v1/catalog/validate", tags=["Catalog"])
async def validate_catalog(mocks_dir: Optional[str] = Query(default=None)):
    root = Path(mocks_dir or config.mocks.root_dir)
    try:
        report = validate_mock_tree(root, config.mocks.extension)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"valid": not report.has_errors, **report.to_dict()}

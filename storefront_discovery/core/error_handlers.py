"""
Exception handlers — map domain errors onto HTTP responses.

ConfigurationError is a deployment defect (500), SearchError is an explicit
search failure (500) so callers can tell "no matches" from "search
unavailable", any other UpstreamError reaching a route is a bad gateway.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront_discovery.core.exceptions import (
    ConfigurationError,
    SearchError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"configuration error path={request.url.path} missing={exc.missing_field}")
    return JSONResponse(
        status_code=500,
        content={"error": f"Server misconfigured: {exc}"},
    )


async def search_error_handler(request: Request, exc: SearchError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": SearchError.reason})


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(f"upstream error path={request.url.path} service={exc.service} detail={exc}")
    return JSONResponse(status_code=502, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(SearchError, search_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)

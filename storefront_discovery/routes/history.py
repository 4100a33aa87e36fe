"""
History routes — recently-viewed tracking backed by a signed cookie.

Provides:
- POST /api/track-view  – record a product view, reissue the cookie
- GET  /api/history     – list viewed handles, optionally expanded
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from storefront_discovery.container import get_history_expander, get_viewed_handles_cookie
from storefront_discovery.core.constants.history import MAX_VIEWED_HANDLES
from storefront_discovery.core.exceptions import UpstreamError, ValidationError
from storefront_discovery.schemas.history import (
    ExpandedProduct,
    HistoryResponse,
    TrackViewError,
    TrackViewResponse,
)
from storefront_discovery.services.history_expander import HistoryExpander
from storefront_discovery.services.history_service import (
    list_history,
    normalize_history,
    record_view,
)
from storefront_discovery.utils.params import parse_int
from storefront_discovery.utils.viewed_handles_cookie import ViewedHandlesCookie

logger = logging.getLogger(__name__)

router = APIRouter(tags=["history"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_handle(request: Request) -> Optional[str]:
    """Read ``handle`` from a JSON or form-encoded body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        value = form.get("handle")
    else:
        try:
            body = await request.json()
        except ValueError:
            return None
        value = body.get("handle") if isinstance(body, dict) else None
    return value if isinstance(value, str) else None


@router.post(
    "/track-view",
    response_model=TrackViewResponse,
    responses={400: {"model": TrackViewError}},
)
async def track_view(
    request: Request,
    response: Response,
    cookie: ViewedHandlesCookie = Depends(get_viewed_handles_cookie),
):
    handle = await read_handle(request)
    current = normalize_history(cookie.read(request))

    try:
        handles = record_view(current, handle)
    except ValidationError as e:
        return JSONResponse(status_code=400, content=TrackViewError(error=e.message).model_dump())

    handles = cookie.fit(handles)
    cookie.write(response, handles)
    return TrackViewResponse(ok=True, handles=handles)


@router.get("/history", response_model=HistoryResponse, response_model_exclude_unset=True)
async def history(
    request: Request,
    limit: Optional[str] = Query(default=None),
    cookie: ViewedHandlesCookie = Depends(get_viewed_handles_cookie),
    expander: HistoryExpander = Depends(get_history_expander),
) -> HistoryResponse:
    """
    List recently viewed handles, newest first.

    With the ``expand`` flag the first handles are resolved into product
    records; if the catalog is unavailable the bare handles are returned.
    """
    handles = list_history(
        normalize_history(cookie.read(request)),
        parse_int(limit, MAX_VIEWED_HANDLES),
    )
    if "expand" not in request.query_params or not handles:
        return HistoryResponse(handles=handles)

    try:
        products = await expander.expand(handles)
    except UpstreamError as e:
        logger.warning(f"history expansion failed, returning bare handles count={len(handles)}: {e}")
        return HistoryResponse(handles=handles)

    return HistoryResponse(
        handles=handles,
        products=[ExpandedProduct.model_validate(p) for p in products],
    )

"""Catalog endpoints for the API."""

from fastapi import APIRouter, HTTPException, status

from catalogtree.exceptions import RenderError
from catalogtree.parser import parse_catalog
from catalogtree.render import render
from catalogtree.schemas import Diagnostic
from catalogtree.search import filter_catalog
from catalogtree.tree import count_nodes
from catalogtree.utils.logging_config import get_logger
from server.models import ParseRequest, ParseResponse, RenderRequest, RenderResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post("/api/parse", response_model=ParseResponse, response_model_by_alias=True)
async def api_parse(parse_request: ParseRequest) -> ParseResponse:
    """Parse catalog source and return its tree.

    **Parameters**

    - **parse_request** (`ParseRequest`): source text and optional search query

    **Returns**

    - **ParseResponse**: the forest, parse diagnostics, the node count and,
      for a search, the uids of matching entries

    """
    diagnostics: list[Diagnostic] = []
    forest = parse_catalog(parse_request.source, diagnostics=diagnostics)
    hits: list[str] = []
    if parse_request.query:
        result = filter_catalog(forest, parse_request.query)
        forest, hits = result.forest, result.hits

    logger.info(
        "Parsed catalog",
        extra={"nodes": count_nodes(forest), "diagnostics": len(diagnostics)},
    )
    return ParseResponse(forest=forest, diagnostics=diagnostics, node_count=count_nodes(forest), hits=hits)


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Parse catalog source and render it in the requested format.

    **Raises**

    - **HTTPException**: **400** - the requested format is not supported

    """
    forest = parse_catalog(render_request.source)
    try:
        content = render(forest, render_request.format)
    except RenderError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return RenderResponse(format=render_request.format, content=content)

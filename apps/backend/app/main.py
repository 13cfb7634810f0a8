"""FastAPI application exposing Draft.js → tree conversion from the shared library."""

from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from drafttree import ConversionResult, DraftConverter, InvalidDraftContentError
from drafttree.utils import get_logger

LOGGER = get_logger("drafttree.api")

app = FastAPI(title="drafttree API", version="1.0.0")
DOCS_PREFIX = "/api"

_converter = DraftConverter()


def _perform_conversion(payload: dict[str, Any]) -> ConversionResult:
    """Run the converter, mapping invalid input to an HTTP 400."""

    try:
        return _converter.convert(payload)
    except InvalidDraftContentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.get(
    f"{DOCS_PREFIX}/openapi.json",
    include_in_schema=False,
    name="prefixed_openapi",
)
async def prefixed_openapi() -> JSONResponse:
    """Expose the OpenAPI schema under the gateway's ``/api`` prefix."""

    return JSONResponse(app.openapi())


@app.get(f"{DOCS_PREFIX}/docs", include_in_schema=False)
async def prefixed_swagger_ui(request: Request) -> HTMLResponse:
    """Serve Swagger UI from the same ``/api`` prefix used by the gateway."""

    return get_swagger_ui_html(
        openapi_url=str(request.url_for("prefixed_openapi")),
        title=f"{app.title} - Swagger UI",
    )


@app.post("/convert/draft-to-tree", response_class=JSONResponse)
async def convert_draft_to_tree(
    payload: dict[str, Any] = Body(..., description="Draft.js raw content (blocks + entityMap)"),
    strict: bool = Query(False, description="Reject content that could not be fully mapped"),
) -> JSONResponse:
    """Convert Draft.js raw content and return the tree plus diagnostics."""

    result = await run_in_threadpool(_perform_conversion, payload)
    body = result.to_dict()
    if strict and not result.unmatched.empty:
        LOGGER.info("Rejecting conversion with unmatched content: %s", result.unmatched.counts())
        return JSONResponse(status_code=422, content=body)
    return JSONResponse(content=body)

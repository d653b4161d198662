"""Snippet API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from common.config import UploaderConfig, get_config
from common.serialization import serialize_dataclass
from extract_fields.snippet import PhotoLoader, Snippet
from parse_snippets.parse_snippet import SnippetParseError
from snippet_api.models import StoryResponse, ValidationResponse
from snippet_catalog.catalog import SnippetCatalog
from snippet_catalog.models import build_listing
from validate_snippets.validate import validate_article

router = APIRouter(tags=["snippets"])


def get_catalog(request: Request) -> SnippetCatalog:
    """Dependency to get the story catalog."""
    catalog = request.app.state.catalog
    if catalog is None:
        raise HTTPException(status_code=503, detail="Story catalog is not configured")
    return catalog


def get_photo_loader(request: Request) -> Optional[PhotoLoader]:
    """Dependency to get the photo loader (None when no store is configured)."""
    return request.app.state.photo_loader


def _check_snippet(
    data: bytes, photo_loader: Optional[PhotoLoader], min_body_chars: int
) -> ValidationResponse:
    snippet = Snippet.from_source(data, name="uploaded snippet", photo_loader=photo_loader)
    errors = validate_article(snippet.to_article(), min_body_chars=min_body_chars)
    story = StoryResponse(**serialize_dataclass(build_listing(snippet)))
    return ValidationResponse(story=story, errors=errors)


@router.post("/validate-snippet", response_model=ValidationResponse)
async def validate_snippet(
    request: Request,
    config: Annotated[UploaderConfig, Depends(get_config)],
    photo_loader: Annotated[Optional[PhotoLoader], Depends(get_photo_loader)],
):
    """Parse a snippet posted as the raw request body and validate it.

    Returns the derived story fields together with every validation
    error; an empty error list means the snippet can be uploaded.
    """
    data = await request.body()
    try:
        # Photo lookup hits the store, keep it off the event loop
        return await run_in_threadpool(
            _check_snippet, data, photo_loader, config.validation.min_body_chars
        )
    except SnippetParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/available-stories", response_model=list[StoryResponse])
async def list_available_stories(
    catalog: Annotated[SnippetCatalog, Depends(get_catalog)],
):
    """List stories from recently exported snippets."""
    return [StoryResponse(**serialize_dataclass(listing)) for listing in catalog.get_stories()]

# explore.py
from typing import Callable

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from creatorhub.config import settings
from creatorhub.routers.dependencies import get_session_factory
from creatorhub.schemas.explore import SearchParams, SearchResponse
from creatorhub.services.explore_service import parse_csv, search_all


router = APIRouter()


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query(""),
    contentTypes: str | None = Query(None, description="Comma-separated: users,projects,articles,posts"),
    userTypes: str | None = Query(None, description="Comma-separated owner user types"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    sortBy: str | None = Query(None),
    sortOrder: str | None = Query(None),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> SearchResponse:
    params = SearchParams(
        q=q,
        content_types=parse_csv(contentTypes),
        user_types=parse_csv(userTypes),
        page=page,
        limit=limit,
        sort_by=sortBy,
        sort_order=sortOrder,
    )
    return await search_all(session_factory, params)

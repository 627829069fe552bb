# featured.py
from typing import Callable

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creatorhub.config import settings
from creatorhub.routers.dependencies import get_session_factory
from creatorhub.schemas.featured import FeaturedContent
from creatorhub.services.featured_service import get_featured_content


router = APIRouter()


@router.get("", response_model=FeaturedContent)
async def featured(session_factory: Callable[[], Session] = Depends(get_session_factory)) -> FeaturedContent:
    return await get_featured_content(session_factory, limit=settings.featured_limit)

# interactions.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.models.interaction import INTERACTION_KINDS
from creatorhub.models.user import User
from creatorhub.routers.dependencies import get_current_user
from creatorhub.schemas.common import MessageResponse
from creatorhub.schemas.interaction import (
    EntityType,
    InteractionCount,
    InteractionRead,
    InteractionRequest,
    InteractionStatus,
)
from creatorhub.services import interaction_service


def entity_query(
    entityType: EntityType = Query(...),
    entityId: int = Query(..., ge=1),
) -> InteractionRequest:
    return InteractionRequest(entity_type=entityType, entity_id=entityId)


def build_interaction_router(kind: str) -> APIRouter:
    """Routes for one interaction table (likes, follows or watches)."""

    router = APIRouter()

    @router.get("/count", response_model=InteractionCount)
    def count(target: InteractionRequest = Depends(entity_query), db: Session = Depends(get_db)) -> InteractionCount:
        return interaction_service.get_count(db, kind, target.entity_type, target.entity_id)

    @router.get("/status", response_model=InteractionStatus)
    def check_status(
        target: InteractionRequest = Depends(entity_query),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ) -> InteractionStatus:
        return interaction_service.check_status(db, kind, target.entity_type, target.entity_id, current_user.id)

    @router.post("", response_model=InteractionRead, status_code=status.HTTP_201_CREATED)
    def create(
        payload: InteractionRequest,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ) -> InteractionRead:
        return interaction_service.create(db, kind, payload.entity_type, payload.entity_id, current_user.id)

    @router.delete("", response_model=MessageResponse)
    def delete(
        target: InteractionRequest = Depends(entity_query),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ) -> MessageResponse:
        interaction_service.delete(db, kind, target.entity_type, target.entity_id, current_user.id)
        return MessageResponse(message=f"Removed from {kind}")

    return router


routers = {kind: build_interaction_router(kind) for kind in INTERACTION_KINDS}

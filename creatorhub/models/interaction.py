from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import declared_attr

from creatorhub.database import Base, utc_now


class _Interaction:
    """A (entity_type, entity_id, user_id) triple; an existing row means the interaction is active."""

    id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(16), nullable=False)
    entity_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    @declared_attr
    def __table_args__(cls):
        return (
            UniqueConstraint("entity_type", "entity_id", "user_id", name=f"uq_{cls.__tablename__}_entity_user"),
        )


class Like(_Interaction, Base):
    __tablename__ = "likes"


class Follow(_Interaction, Base):
    __tablename__ = "follows"


class Watch(_Interaction, Base):
    __tablename__ = "watches"


# Route/collection name -> (model, counter column on the target entity).
INTERACTION_KINDS: dict[str, tuple[type[_Interaction], str]] = {
    "likes": (Like, "likes_count"),
    "follows": (Follow, "follows_count"),
    "watches": (Watch, "watches_count"),
}

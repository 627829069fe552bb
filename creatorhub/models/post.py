from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from creatorhub.database import Base, utc_now


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")

    # Exactly one image source is authoritative, chosen by post_image_display.
    post_image_display = Column(String(16), nullable=False, default="url")
    post_image_url = Column(String(500), nullable=False, default="")
    post_image_upload = Column(String(500), nullable=False, default="")

    tags = Column(JSON, nullable=False, default=list)

    likes = Column(Integer, nullable=False, default=0)
    comment_count = Column(Integer, nullable=False, default=0)

    likes_count = Column(Integer, nullable=False, default=0)
    follows_count = Column(Integer, nullable=False, default=0)
    watches_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    owner = relationship("User", lazy="joined")
    comments = relationship(
        "PostComment",
        order_by="PostComment.created_at",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def media_url(self) -> str | None:
        if self.post_image_display == "upload":
            return self.post_image_upload or None
        return self.post_image_url or None


class PostComment(Base):
    __tablename__ = "post_comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    author = relationship("User", lazy="joined")

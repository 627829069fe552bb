from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from creatorhub.database import Base, utc_now


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="Untitled Article")

    tags = Column(JSON, nullable=False, default=list)
    citations = Column(JSON, nullable=False, default=list)
    contributors = Column(JSON, nullable=False, default=list)
    related_media = Column(JSON, nullable=False, default=list)

    likes_count = Column(Integer, nullable=False, default=0)
    follows_count = Column(Integer, nullable=False, default=0)
    watches_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    owner = relationship("User", lazy="joined")
    sections = relationship(
        "ArticleSection",
        order_by="ArticleSection.section_order",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class ArticleSection(Base):
    __tablename__ = "article_sections"

    id = Column(Integer, primary_key=True, index=True)
    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(32), nullable=False, default="full-width-text")
    title = Column(String(255), nullable=True)
    subtitle = Column(String(255), nullable=True)
    text = Column(Text, nullable=True)
    media_url = Column(String(500), nullable=True)
    media_subtext = Column(String(500), nullable=True)
    section_order = Column(Integer, nullable=False, default=0)

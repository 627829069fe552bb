from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from creatorhub.database import Base, utc_now


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    project_name = Column(String(255), nullable=False, default="")
    project_description = Column(Text, nullable=False, default="")
    project_type = Column(String(64), nullable=False, default="", index=True)
    project_category = Column(String(100), nullable=False, default="")
    project_title = Column(String(255), nullable=False, default="")
    project_duration = Column(String(100), nullable=False, default="")
    project_handle = Column(String(255), nullable=False, default="")
    project_followers = Column(Integer, nullable=False, default=0)
    project_image = Column(String(500), nullable=True)

    client = Column(String(255), nullable=False, default="")
    client_location = Column(String(255), nullable=False, default="")
    client_website = Column(String(500), nullable=False, default="")
    contract_type = Column(String(100), nullable=False, default="")
    contract_duration = Column(String(100), nullable=False, default="")
    contract_value = Column(String(100), nullable=False, default="")
    project_timeline = Column(String(255), nullable=False, default="")
    budget = Column(String(100), nullable=False, default="")
    budget_range = Column(String(100), nullable=False, default="")
    currency = Column(String(10), nullable=False, default="USD")
    project_status = Column(String(64), nullable=False, default="")
    project_status_tag = Column(String(64), nullable=False, default="")
    project_visibility = Column(String(32), nullable=False, default="public")
    search_visibility = Column(Boolean, nullable=False, default=True)
    short_term_goals = Column(Text, nullable=False, default="")
    long_term_goals = Column(Text, nullable=False, default="")

    # Scalar arrays
    skills_required = Column(JSON, nullable=False, default=list)
    expertise_needed = Column(JSON, nullable=False, default=list)
    target_audience = Column(JSON, nullable=False, default=list)
    solutions_offered = Column(JSON, nullable=False, default=list)
    project_tags = Column(JSON, nullable=False, default=list)
    industry_tags = Column(JSON, nullable=False, default=list)
    technology_tags = Column(JSON, nullable=False, default=list)
    website_links = Column(JSON, nullable=False, default=list)

    # Flattened groups: {group}_{key}
    seeking_creator = Column(Boolean, nullable=False, default=False)
    seeking_brand = Column(Boolean, nullable=False, default=False)
    seeking_freelancer = Column(Boolean, nullable=False, default=False)
    seeking_contractor = Column(Boolean, nullable=False, default=False)
    social_links_youtube = Column(String(500), nullable=False, default="")
    social_links_instagram = Column(String(500), nullable=False, default="")
    social_links_github = Column(String(500), nullable=False, default="")
    social_links_twitter = Column(String(500), nullable=False, default="")
    social_links_linkedin = Column(String(500), nullable=False, default="")
    notification_preferences_email = Column(Boolean, nullable=False, default=False)
    notification_preferences_push = Column(Boolean, nullable=False, default=False)
    notification_preferences_digest = Column(Boolean, nullable=False, default=False)

    # Serialized JSON arrays of objects (one column per list, not child tables).
    team_members = Column(Text, nullable=False, default="[]")
    collaborators = Column(Text, nullable=False, default="[]")
    advisors = Column(Text, nullable=False, default="[]")
    partners = Column(Text, nullable=False, default="[]")
    testimonials = Column(Text, nullable=False, default="[]")
    deliverables = Column(Text, nullable=False, default="[]")
    milestones = Column(Text, nullable=False, default="[]")

    likes_count = Column(Integer, nullable=False, default=0)
    follows_count = Column(Integer, nullable=False, default=0)
    watches_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    owner = relationship("User", lazy="joined")

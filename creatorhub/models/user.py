from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from creatorhub.database import Base, utc_now


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    profile_image = Column(String(500), nullable=True)
    bio = Column(Text, nullable=False, default="")
    user_type = Column(String(32), nullable=False, default="user", index=True)

    career_title = Column(String(255), nullable=False, default="")
    career_experience = Column(Integer, nullable=False, default=0)
    social_media_handle = Column(String(255), nullable=False, default="")
    social_media_followers = Column(Integer, nullable=False, default=0)
    company = Column(String(255), nullable=False, default="")
    company_location = Column(String(255), nullable=False, default="")
    company_website = Column(String(500), nullable=False, default="")
    contract_type = Column(String(100), nullable=False, default="")
    contract_duration = Column(String(100), nullable=False, default="")
    contract_rate = Column(String(100), nullable=False, default="")
    availability_status = Column(String(100), nullable=False, default="")
    preferred_work_type = Column(String(100), nullable=False, default="")
    rate_range = Column(String(100), nullable=False, default="")
    currency = Column(String(10), nullable=False, default="USD")
    standard_service_rate = Column(String(100), nullable=False, default="")
    standard_rate_type = Column(String(100), nullable=False, default="")
    compensation_type = Column(String(100), nullable=False, default="")
    work_status = Column(String(100), nullable=False, default="")
    seeking = Column(String(255), nullable=False, default="")
    short_term_goals = Column(Text, nullable=False, default="")
    long_term_goals = Column(Text, nullable=False, default="")
    profile_visibility = Column(String(32), nullable=False, default="public")
    search_visibility = Column(Boolean, nullable=False, default=True)

    # Flattened groups: {group}_{key}
    social_links_youtube = Column(String(500), nullable=False, default="")
    social_links_instagram = Column(String(500), nullable=False, default="")
    social_links_github = Column(String(500), nullable=False, default="")
    social_links_twitter = Column(String(500), nullable=False, default="")
    social_links_linkedin = Column(String(500), nullable=False, default="")
    notification_preferences_email = Column(Boolean, nullable=False, default=False)
    notification_preferences_push = Column(Boolean, nullable=False, default=False)
    notification_preferences_digest = Column(Boolean, nullable=False, default=False)

    # Scalar arrays
    skills = Column(JSON, nullable=False, default=list)
    expertise = Column(JSON, nullable=False, default=list)
    target_audience = Column(JSON, nullable=False, default=list)
    solutions_offered = Column(JSON, nullable=False, default=list)
    interest_tags = Column(JSON, nullable=False, default=list)
    experience_tags = Column(JSON, nullable=False, default=list)
    education_tags = Column(JSON, nullable=False, default=list)
    website_links = Column(JSON, nullable=False, default=list)

    likes_count = Column(Integer, nullable=False, default=0)
    follows_count = Column(Integer, nullable=False, default=0)
    watches_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    work_experience = relationship(
        "UserWorkExperience", order_by="UserWorkExperience.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    education = relationship(
        "UserEducation", order_by="UserEducation.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    certifications = relationship(
        "UserCertification", order_by="UserCertification.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    accolades = relationship(
        "UserAccolade", order_by="UserAccolade.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    endorsements = relationship(
        "UserEndorsement", order_by="UserEndorsement.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    featured_projects = relationship(
        "UserFeaturedProject", order_by="UserFeaturedProject.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )
    case_studies = relationship(
        "UserCaseStudy", order_by="UserCaseStudy.sort_index", cascade="all, delete-orphan", lazy="selectin"
    )

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declared_attr

from creatorhub.database import Base


class _UserCollectionItem:
    """Columns shared by every dependent profile collection.

    Rows are replaced wholesale on each profile update; `sort_index` keeps the
    order the client submitted.
    """

    id = Column(Integer, primary_key=True, index=True)
    sort_index = Column(Integer, nullable=False, default=0)
    media = Column(String(500), nullable=True)

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Item fields exposed through the API, in addition to `media`.
    fields: tuple[str, ...] = ()


class UserWorkExperience(_UserCollectionItem, Base):
    __tablename__ = "user_work_experience"
    fields = ("title", "company", "years")

    title = Column(String(255), nullable=False, default="")
    company = Column(String(255), nullable=False, default="")
    years = Column(String(50), nullable=False, default="")


class UserEducation(_UserCollectionItem, Base):
    __tablename__ = "user_education"
    fields = ("degree", "school", "year")

    degree = Column(String(255), nullable=False, default="")
    school = Column(String(255), nullable=False, default="")
    year = Column(String(50), nullable=False, default="")


class UserCertification(_UserCollectionItem, Base):
    __tablename__ = "user_certifications"
    fields = ("name", "issuer", "year")

    name = Column(String(255), nullable=False, default="")
    issuer = Column(String(255), nullable=False, default="")
    year = Column(String(50), nullable=False, default="")


class UserAccolade(_UserCollectionItem, Base):
    __tablename__ = "user_accolades"
    fields = ("title", "issuer", "year")

    title = Column(String(255), nullable=False, default="")
    issuer = Column(String(255), nullable=False, default="")
    year = Column(String(50), nullable=False, default="")


class UserEndorsement(_UserCollectionItem, Base):
    __tablename__ = "user_endorsements"
    fields = ("name", "position", "company", "text")

    name = Column(String(255), nullable=False, default="")
    position = Column(String(255), nullable=False, default="")
    company = Column(String(255), nullable=False, default="")
    text = Column(Text, nullable=False, default="")


class UserFeaturedProject(_UserCollectionItem, Base):
    __tablename__ = "user_featured_projects"
    fields = ("title", "description", "url")

    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    url = Column(String(500), nullable=False, default="")


class UserCaseStudy(_UserCollectionItem, Base):
    __tablename__ = "user_case_studies"
    fields = ("title", "description", "url")

    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    url = Column(String(500), nullable=False, default="")


# API collection name -> child model.
USER_COLLECTIONS: dict[str, type[_UserCollectionItem]] = {
    "work_experience": UserWorkExperience,
    "education": UserEducation,
    "certifications": UserCertification,
    "accolades": UserAccolade,
    "endorsements": UserEndorsement,
    "featured_projects": UserFeaturedProject,
    "case_studies": UserCaseStudy,
}

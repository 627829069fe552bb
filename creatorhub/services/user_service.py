# user_service.py
import logging
from typing import Any

from fastapi import UploadFile
from sqlalchemy.orm import Session

from creatorhub.config import is_admin_email, settings
from creatorhub.database import utc_now
from creatorhub.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError, persistence_guard
from creatorhub.models.user import User
from creatorhub.models.user_collections import USER_COLLECTIONS
from creatorhub.schemas.user import UserPortfolio, UserProfile, UserUpdate
from creatorhub.services.article_service import list_articles_by_user
from creatorhub.services.codec import model_to_row, user_to_nested, user_to_row
from creatorhub.services.ownership import ensure_owner
from creatorhub.services.post_service import list_posts_by_user
from creatorhub.services.project_service import list_projects_by_user
from creatorhub.services.storage import save_upload
from creatorhub.utils.password_hash import hash_password, verify_password


logger = logging.getLogger(__name__)

# Nullable root columns; every other scalar keeps its stored value when a patch sends null.
_NULLABLE_FIELDS = {"profile_image"}


def _collection_item(row: Any) -> dict[str, Any]:
    item = {field: getattr(row, field) for field in row.fields}
    item["media"] = row.media
    return item


def build_user_profile(user: User) -> UserProfile:
    nested = user_to_nested(model_to_row(user))
    for name in USER_COLLECTIONS:
        nested[name] = [_collection_item(row) for row in getattr(user, name)]
    nested["is_admin"] = is_admin_email(user.email)
    return UserProfile.model_validate(nested)


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == (email or "").strip().lower()).first()


def get_user_aggregate(db: Session, user_id: int) -> UserProfile | None:
    # Collections are selectin-loaded with the root row.
    user = get_user(db, user_id)
    if user is None:
        return None
    return build_user_profile(user)


def create_user(db: Session, *, username: str, email: str, password: str) -> User:
    email = email.strip().lower()
    if get_user_by_email(db, email):
        raise ConflictError("User with this email already exists")
    if db.query(User).filter(User.username == username).first():
        raise ConflictError("Username already taken")

    now = utc_now()
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        profile_image=settings.default_avatar,
        bio="",
        user_type="user",
        created_at=now,
        updated_at=now,
    )
    with persistence_guard(db, "registration", conflict_detail="User with this email already exists"):
        db.add(user)
        db.commit()
    db.refresh(user)
    logger.info("registered user id=%s username=%s", user.id, user.username)
    return user


def authenticate(db: Session, *, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid credentials")
    return user


def update_user_aggregate(db: Session, user_id: int, actor: User, patch: UserUpdate) -> UserProfile:
    """Apply a profile patch to the user row and its dependent collections.

    Every collection named in the patch is replaced wholesale (delete all,
    then insert the submitted list in order); collections the patch does not
    mention are left as they are. Root and collections commit together.
    """

    user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    ensure_owner(user.id, actor, "Not authorized to update this profile")

    data = patch.model_dump(exclude_unset=True)
    if not data:
        raise ValidationError("No update data provided")

    collections = {name: data.pop(name) for name in list(data) if name in USER_COLLECTIONS}
    row = user_to_row(data, partial=True)

    with persistence_guard(db, "profile update", conflict_detail="Username already taken"):
        for field, value in row.items():
            if value is None and field not in _NULLABLE_FIELDS:
                continue
            setattr(user, field, value)
        user.updated_at = utc_now()

        for name, items in collections.items():
            model = USER_COLLECTIONS[name]
            db.query(model).filter(model.user_id == user.id).delete(synchronize_session=False)
            db.flush()
            db.add_all(
                [
                    model(
                        user_id=user.id,
                        sort_index=index,
                        media=item.get("media"),
                        **{field: item.get(field) or "" for field in model.fields},
                    )
                    for index, item in enumerate(items or [])
                ]
            )
        db.commit()

    logger.info("updated profile user_id=%s fields=%s collections=%s", user.id, sorted(row), sorted(collections))
    # Drop the stale collection state loaded before the bulk delete.
    db.expire_all()
    return get_user_aggregate(db, user_id)


def set_profile_image(db: Session, user_id: int, actor: User, upload: UploadFile | None) -> str:
    user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    ensure_owner(user.id, actor, "Not authorized to update this profile")

    image_url = save_upload(upload, folder="profiles", prefix="profile")
    with persistence_guard(db, "profile image update"):
        user.profile_image = image_url
        user.updated_at = utc_now()
        db.commit()
    return image_url


def get_user_portfolio(db: Session, user_id: int) -> UserPortfolio:
    if get_user(db, user_id) is None:
        raise NotFoundError("User not found")
    return UserPortfolio(
        user_id=user_id,
        projects=list_projects_by_user(db, user_id),
        articles=list_articles_by_user(db, user_id),
        posts=list_posts_by_user(db, user_id),
    )

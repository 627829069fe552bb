from creatorhub.config import is_admin_email
from creatorhub.errors import AuthorizationError
from creatorhub.models.user import User


def can_modify(owner_id: int, actor: User) -> bool:
    return actor.id == owner_id or is_admin_email(actor.email)


def ensure_owner(owner_id: int, actor: User, detail: str) -> None:
    if not can_modify(owner_id, actor):
        raise AuthorizationError(detail)

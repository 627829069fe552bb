from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session


logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not allowed"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class PayloadTooLargeError(AppError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    default_detail = "Upload too large"


class PersistenceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Database error"


@contextmanager
def persistence_guard(db: Session, action: str, *, conflict_detail: str | None = None) -> Iterator[None]:
    """Translate SQLAlchemy failures inside the block into the error taxonomy.

    The session is rolled back before re-raising, so nothing from the failed
    unit of work is left pending.
    """

    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        logger.info("%s rejected by constraint: %s", action, exc.orig)
        raise ConflictError(conflict_detail or f"{action} conflicts with existing data") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s failed", action)
        raise PersistenceError(f"{action} failed") from exc

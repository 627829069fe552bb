# main.py
import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from creatorhub.config import build_sqlalchemy_db_url, require_jwt_secret, settings
from creatorhub.database import Base, engine
from creatorhub.errors import AppError
from creatorhub import models  # noqa: F401  (registers every table on Base.metadata)
from creatorhub.routers import articles, auth, explore, featured, health, posts, projects, users
from creatorhub.routers.interactions import routers as interaction_routers


logger = logging.getLogger("creatorhub")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app() -> FastAPI:
    configure_logging()
    require_jwt_secret(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @application.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @application.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health.router)

    prefix = settings.api_prefix
    application.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])
    application.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])
    application.include_router(projects.router, prefix=f"{prefix}/projects", tags=["projects"])
    application.include_router(articles.router, prefix=f"{prefix}/articles", tags=["articles"])
    application.include_router(posts.router, prefix=f"{prefix}/posts", tags=["posts"])
    application.include_router(explore.router, prefix=f"{prefix}/explore", tags=["explore"])
    application.include_router(featured.router, prefix=f"{prefix}/featured", tags=["featured"])
    for kind, router in interaction_routers.items():
        application.include_router(router, prefix=f"{prefix}/{kind}", tags=["interactions"])

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    # Only sqlite databases are auto-migrated; anything shared goes through scripts/create_orm_tables.py.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()

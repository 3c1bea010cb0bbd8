import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gh_comments.common.exceptions import (
    internal_error_response,
    unexpected_exception_handler,
)
from gh_comments.comments.router import router as comments_router
from gh_comments.config import get_settings
from gh_comments.github.dependencies import create_github_client

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.github_client = create_github_client(settings)
    yield
    await app.state.github_client.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={**internal_error_response},
    version=settings.VERSION,
)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.exception_handler(Exception)(unexpected_exception_handler)

app.include_router(comments_router)

"""FastAPI dependencies for services built at startup."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .database import get_async_session
from .generation import GenerationService, UserLocks
from .llm import TextGenerator


def get_text_generator(request: Request) -> TextGenerator:
    """LLM adapter created in the application lifespan."""
    return request.app.state.text_generator


def get_user_locks(request: Request) -> UserLocks:
    """Process-wide per-user creation locks."""
    return request.app.state.user_locks


def get_generation_service(
    db: AsyncSession = Depends(get_async_session),
    generator: TextGenerator = Depends(get_text_generator),
    locks: UserLocks = Depends(get_user_locks),
    settings: Settings = Depends(get_settings),
) -> GenerationService:
    return GenerationService(
        db,
        generator,
        profile=settings.generation_profile,
        project_limit=settings.project_limit,
        locks=locks,
    )

"""Prompt history store.

Append-only. No ownership check here: callers authorize access to the
project before touching its history.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.models import Prompt

logger = structlog.get_logger()


class PromptRepository:
    """Per-project prompt log."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(self, project_id: int, prompt: str) -> Prompt:
        entry = Prompt(project_id=project_id, prompt=prompt)
        self.session.add(entry)
        await self.session.commit()
        await self.session.refresh(entry)

        logger.info("prompt_appended", project_id=project_id, prompt_id=entry.id)
        return entry

    async def list_for_project(self, project_id: int) -> list[Prompt]:
        """Return the project's prompts, newest first."""
        query = (
            select(Prompt)
            .where(Prompt.project_id == project_id)
            # id breaks ties between entries stamped within the same clock tick
            .order_by(Prompt.created_at.desc(), Prompt.id.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

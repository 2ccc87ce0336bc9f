"""Project store.

Every query is scoped by the owning user's id: a project that belongs to
someone else looks exactly like one that does not exist.
"""

from typing import NamedTuple

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.models import Project, Prompt

from ..errors import ProjectLimitReached

logger = structlog.get_logger()

DEFAULT_PROJECT_LIMIT = 5


class ProjectSummary(NamedTuple):
    """Project listing entry without the generated code."""

    id: int
    name: str


class ProjectRepository:
    """CRUD over projects owned by a user."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_for_user(self, user_id: int) -> int:
        query = select(func.count()).select_from(Project).where(Project.user_id == user_id)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def create_with_limit(
        self,
        user_id: int,
        name: str,
        react_code: str,
        html_code: str,
        limit: int = DEFAULT_PROJECT_LIMIT,
    ) -> Project:
        """Insert a project unless the user already owns ``limit`` of them.

        The count and the insert are separate statements; callers that need
        the quota to hold under concurrency serialize calls per user.

        Raises:
            ProjectLimitReached: user is at the limit, nothing was written
        """
        count = await self.count_for_user(user_id)
        if count >= limit:
            logger.warning("project_limit_reached", user_id=user_id, count=count, limit=limit)
            raise ProjectLimitReached(user_id, limit)

        project = Project(
            user_id=user_id,
            name=name,
            react_code=react_code,
            html_code=html_code,
        )
        self.session.add(project)
        await self.session.commit()
        await self.session.refresh(project)

        logger.info("project_created", project_id=project.id, user_id=user_id, name=name)
        return project

    async def get_by_id_for_user(self, project_id: int, user_id: int) -> Project | None:
        query = select(Project).where(Project.id == project_id, Project.user_id == user_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def update_code_for_user(
        self,
        project_id: int,
        user_id: int,
        react_code: str,
        html_code: str,
    ) -> Project | None:
        """Overwrite the generated code of an owned project.

        Returns None when the project does not exist for this user.
        """
        project = await self.get_by_id_for_user(project_id, user_id)
        if not project:
            return None

        project.react_code = react_code
        project.html_code = html_code

        await self.session.commit()
        await self.session.refresh(project)

        logger.info("project_code_updated", project_id=project.id, user_id=user_id)
        return project

    async def delete_for_user(self, user_id: int, project_id: int) -> bool:
        """Delete an owned project together with its prompt history.

        Returns whether a project row was removed.
        """
        owned = select(Project.id).where(Project.id == project_id, Project.user_id == user_id)
        await self.session.execute(
            delete(Prompt)
            .where(Prompt.project_id.in_(owned))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(Project)
            .where(Project.id == project_id, Project.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()

        deleted = result.rowcount > 0
        if deleted:
            logger.info("project_deleted", project_id=project_id, user_id=user_id)
        return deleted

    async def list_light_for_user(self, user_id: int) -> list[ProjectSummary]:
        """List (id, name) of the user's projects, newest first."""
        query = (
            select(Project.id, Project.name)
            .where(Project.user_id == user_id)
            .order_by(Project.created_at.desc(), Project.id.desc())
        )
        result = await self.session.execute(query)
        return [ProjectSummary(id=row.id, name=row.name) for row in result.all()]

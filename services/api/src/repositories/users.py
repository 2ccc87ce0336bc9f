"""User lookups and lifecycle."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.models import Project, Prompt, User

from ..errors import UserNotFound

logger = structlog.get_logger()


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int) -> User | None:
        return await self.session.get(User, user_id)

    async def require(self, user_id: int) -> User:
        """Return the user or raise UserNotFound."""
        user = await self.get(user_id)
        if not user:
            raise UserNotFound(user_id)
        return user

    async def get_by_email(self, email: str) -> User | None:
        query = select(User).where(User.email == email)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)

        logger.info("user_created", user_id=user.id)
        return user

    async def delete(self, user_id: int) -> bool:
        """Delete a user with all their projects and prompt history."""
        owned = select(Project.id).where(Project.user_id == user_id)
        await self.session.execute(
            delete(Prompt)
            .where(Prompt.project_id.in_(owned))
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(Project)
            .where(Project.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(User).where(User.id == user_id).execution_options(synchronize_session=False)
        )
        await self.session.commit()

        deleted = result.rowcount > 0
        if deleted:
            logger.info("user_deleted", user_id=user_id)
        return deleted

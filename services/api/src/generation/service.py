"""Page generation pipeline.

Flow: user check → ownership check + history → prompt → LLM → validation →
project write → history write.

Nothing is written until the model output has been validated. The project
write and the history write are committed separately: if the second fails the
project keeps its new code without a matching history entry.
"""

from dataclasses import dataclass
import time

from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..errors import ProjectNotFound
from ..llm import TextGenerator
from ..repositories import (
    DEFAULT_PROJECT_LIMIT,
    ProjectRepository,
    PromptRepository,
    UserRepository,
)
from .locks import UserLocks
from .profiles import Profile
from .prompts import build_prompt
from .validator import parse_page_response

logger = structlog.get_logger()


@dataclass(frozen=True)
class GenerationResult:
    project_id: int
    html: str
    react: str


def placeholder_project_name() -> str:
    """Name given to projects created without one."""
    return f"Project {int(time.time() * 1000)}"


class GenerationService:
    """Creates or refines a user's project from a page description."""

    def __init__(
        self,
        session: AsyncSession,
        generator: TextGenerator,
        profile: Profile = "react",
        project_limit: int = DEFAULT_PROJECT_LIMIT,
        locks: UserLocks | None = None,
    ):
        self.users = UserRepository(session)
        self.projects = ProjectRepository(session)
        self.prompts = PromptRepository(session)
        self.generator = generator
        self.profile = profile
        self.project_limit = project_limit
        self.locks = locks or UserLocks()

    async def generate(
        self,
        user_id: int,
        prompt: str,
        project_id: int | None = None,
        project_name: str | None = None,
    ) -> GenerationResult:
        """Generate a page and store it.

        Without ``project_id`` a new project is created (subject to the
        per-user limit); with it, the owned project's code is replaced and its
        earlier prompts are given to the model as context.

        Raises:
            UserNotFound: unknown user
            ProjectNotFound: project missing or owned by another user
            ProjectLimitReached: creating would exceed the per-user limit
            LLMInvalidJSON, LLMMissingFields: unusable model output
            UpstreamFailure: provider call failed
        """
        log = logger.bind(user_id=user_id, project_id=project_id, profile=self.profile)

        await self.users.require(user_id)

        history: list[str] = []
        if project_id is not None:
            if not await self.projects.get_by_id_for_user(project_id, user_id):
                raise ProjectNotFound(project_id, user_id)
            history = [entry.prompt for entry in await self.prompts.list_for_project(project_id)]

        log.info("generation_started", history_size=len(history))

        page_prompt = build_prompt(prompt, history, self.profile)
        raw = await self.generator.generate(page_prompt.instructions, page_prompt.message)
        page = parse_page_response(raw, self.profile)

        if project_id is not None:
            project = await self.projects.update_code_for_user(
                project_id, user_id, react_code=page.code, html_code=page.markup
            )
            if not project:
                raise ProjectNotFound(project_id, user_id)
        else:
            name = (project_name or "").strip() or placeholder_project_name()
            async with self.locks.hold(user_id):
                project = await self.projects.create_with_limit(
                    user_id,
                    name,
                    react_code=page.code,
                    html_code=page.markup,
                    limit=self.project_limit,
                )

        await self.prompts.append(project.id, prompt)

        log.info("generation_completed", result_project_id=project.id)
        return GenerationResult(project_id=project.id, html=page.markup, react=page.code)

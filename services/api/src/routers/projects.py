"""Projects router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..database import get_async_session
from ..errors import ProjectNotFound
from ..repositories import ProjectRepository, PromptRepository, UserRepository
from ..schemas import (
    ProjectDelete,
    ProjectDetail,
    ProjectList,
    ProjectRead,
    ProjectSummaryRead,
    PromptRead,
    SuccessResponse,
)

logger = structlog.get_logger()

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=ProjectList)
async def list_projects(
    user_id: int = Query(..., alias="userId", gt=0),
    db: AsyncSession = Depends(get_async_session),
) -> ProjectList:
    """List a user's projects (id and name only)."""
    await UserRepository(db).require(user_id)

    summaries = await ProjectRepository(db).list_light_for_user(user_id)
    return ProjectList(
        projects=[ProjectSummaryRead(id=s.id, name=s.name) for s in summaries]
    )


@router.get("/project", response_model=ProjectDetail)
async def get_project(
    user_id: int = Query(..., alias="userId", gt=0),
    project_id: int = Query(..., alias="projectId", gt=0),
    db: AsyncSession = Depends(get_async_session),
) -> ProjectDetail:
    """Get project code and its prompt history (newest first)."""
    await UserRepository(db).require(user_id)

    project = await ProjectRepository(db).get_by_id_for_user(project_id, user_id)
    if not project:
        raise ProjectNotFound(project_id, user_id)

    prompts = await PromptRepository(db).list_for_project(project.id)
    return ProjectDetail(
        project=ProjectRead.model_validate(project),
        prompts=[PromptRead.model_validate(p) for p in prompts],
    )


@router.delete("/project", response_model=SuccessResponse)
async def delete_project(
    project_in: ProjectDelete,
    db: AsyncSession = Depends(get_async_session),
) -> SuccessResponse:
    """Delete a project and its prompt history."""
    await UserRepository(db).require(project_in.user_id)

    deleted = await ProjectRepository(db).delete_for_user(project_in.user_id, project_in.project_id)
    if not deleted:
        raise ProjectNotFound(project_in.project_id, project_in.user_id)
    return SuccessResponse()

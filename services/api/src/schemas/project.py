"""Project schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .base import CamelModel


class ProjectSummaryRead(BaseModel):
    """Project listing entry."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProjectList(BaseModel):
    projects: list[ProjectSummaryRead]


class ProjectRead(BaseModel):
    """Project with its latest generated code."""

    id: int
    name: str
    react_code: str
    html_code: str

    model_config = ConfigDict(from_attributes=True)


class PromptRead(BaseModel):
    """Prompt history entry."""

    id: int
    prompt: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProjectDetail(BaseModel):
    project: ProjectRead
    prompts: list[PromptRead]


class ProjectDelete(CamelModel):
    """Body of DELETE /api/project."""

    user_id: int = Field(gt=0)
    project_id: int = Field(gt=0)

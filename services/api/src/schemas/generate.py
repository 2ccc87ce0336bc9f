"""Page generation schemas."""

from pydantic import Field, field_validator

from .base import CamelModel


class GeneratePageRequest(CamelModel):
    """Body of POST /api/generate-page."""

    user_id: int = Field(gt=0, description="Owner of the project")
    project_id: int | None = Field(
        None, gt=0, description="Existing project to refine; omit to create a new one"
    )
    project_name: str | None = Field(None, description="Name for a newly created project")
    prompt: str = Field(description="Description of the page to generate")

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Missing or invalid 'prompt' field.")
        return v


class GeneratePageResponse(CamelModel):
    project_id: int
    html: str
    react: str

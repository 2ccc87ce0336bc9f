"""Request and response schemas."""

from .generate import GeneratePageRequest, GeneratePageResponse
from .project import (
    ProjectDelete,
    ProjectDetail,
    ProjectList,
    ProjectRead,
    ProjectSummaryRead,
    PromptRead,
)
from .user import LoginRequest, SuccessResponse, UserCreate, UserDelete, UserIdResponse

__all__ = [
    "GeneratePageRequest",
    "GeneratePageResponse",
    "LoginRequest",
    "ProjectDelete",
    "ProjectDetail",
    "ProjectList",
    "ProjectRead",
    "ProjectSummaryRead",
    "PromptRead",
    "SuccessResponse",
    "UserCreate",
    "UserDelete",
    "UserIdResponse",
]

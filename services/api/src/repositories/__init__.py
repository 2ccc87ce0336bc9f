"""Data access for users, projects and prompt history."""

from .projects import DEFAULT_PROJECT_LIMIT, ProjectRepository, ProjectSummary
from .prompts import PromptRepository
from .users import UserRepository

__all__ = [
    "DEFAULT_PROJECT_LIMIT",
    "ProjectRepository",
    "ProjectSummary",
    "PromptRepository",
    "UserRepository",
]

"""Database models package."""

from .base import Base
from .project import Project
from .prompt import Prompt
from .user import User

__all__ = [
    "Base",
    "Project",
    "Prompt",
    "User",
]

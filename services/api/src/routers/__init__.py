"""Routers package."""

from . import generate, health, projects, users

__all__ = [
    "generate",
    "health",
    "projects",
    "users",
]

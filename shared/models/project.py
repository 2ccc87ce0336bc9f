"""Project model."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Project(Base):
    """Project model - one generated page owned by a single user."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Owner (User ID); every query on projects filters by it
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(String(255))

    # Latest generation output, overwritten on every refinement
    react_code: Mapped[str] = mapped_column(Text, default="")
    html_code: Mapped[str] = mapped_column(Text, default="")

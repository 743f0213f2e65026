"""Project and Solution models - portfolio cards on the marketing site."""

from typing import Any

from sqlalchemy import JSON, Boolean, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel

ICONS = ("Brain", "Zap", "MessageSquare", "Lightbulb", "Cog", "Shield", "Globe", "Users")
BADGES = ("", "Popular", "Featured", "New", "Enterprise")
COLORS = ("primary", "secondary", "accent")

PROJECT_DURATIONS = tuple(f"{n} Month" for n in range(1, 12)) + (
    "1 Year",
    "1 and Half Year",
    "2 Years",
)
PROJECT_TEAM_SIZES = tuple(f"{n} specialists" for n in range(1, 21))
PROJECT_PROCESSES = ("Completed", "Ongoing")

CardIcon = Enum(*ICONS, name="card_icon", create_constraint=True)
CardBadge = Enum(*BADGES, name="card_badge", create_constraint=True)
CardColor = Enum(*COLORS, name="card_color", create_constraint=True)


class Project(BaseModel):
    """A delivered or ongoing client project."""

    __tablename__ = "projects"

    icon: Mapped[str] = mapped_column(CardIcon, nullable=False)
    company_name: Mapped[str] = mapped_column(String(300), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[str] = mapped_column(
        Enum(*PROJECT_DURATIONS, name="project_duration", create_constraint=True),
        nullable=False,
    )
    team_size: Mapped[str] = mapped_column(
        Enum(*PROJECT_TEAM_SIZES, name="project_team_size", create_constraint=True),
        nullable=False,
    )
    key_results: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    technologies_used: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    badge: Mapped[str] = mapped_column(CardBadge, nullable=False, default="")
    color: Mapped[str] = mapped_column(CardColor, nullable=False, default="primary")
    process: Mapped[str] = mapped_column(
        Enum(*PROJECT_PROCESSES, name="project_process", create_constraint=True),
        nullable=False,
        default="Completed",
    )
    dates: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    def __repr__(self) -> str:
        return f"<Project {self.title!r}>"


class Solution(BaseModel):
    """A service offering."""

    __tablename__ = "solutions"

    icon: Mapped[str] = mapped_column(CardIcon, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    features: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    badge: Mapped[str] = mapped_column(CardBadge, nullable=False, default="")
    color: Mapped[str] = mapped_column(CardColor, nullable=False, default="primary")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    def __repr__(self) -> str:
        return f"<Solution {self.title!r}>"

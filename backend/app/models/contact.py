"""Contact model - inbound contact requests grouped per person."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Contact(BaseModel):
    """A person who reached out through the contact form.

    Repeat submissions from the same email, phone or company append to
    ``messages`` instead of creating a new row. Each entry is
    ``{"message": str, "submitted_at": iso8601}``.
    """

    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)
    phone: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    company_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    country: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    job_title: Mapped[str] = mapped_column(String(30), nullable=False)
    messages: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Contact {self.email!r}>"

"""EventRegistration model - one sign-up per person per event."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, utc_now


class EventRegistration(BaseModel):
    """A registration for an event, keyed by the normalised event title.

    The (event_key, email) pair is unique: the same person cannot register
    twice for titles that only differ in case, spacing or dash style.
    """

    __tablename__ = "event_registrations"

    __table_args__ = (
        UniqueConstraint("event_key", "email", name="uq_event_registrations_event_email"),
    )

    # Unbounded: NFKD can make the key longer than the title it came from
    event_key: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    event_title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    company: Mapped[str | None] = mapped_column(String(160), nullable=True)
    location: Mapped[str | None] = mapped_column(String(160), nullable=True)
    address: Mapped[str | None] = mapped_column(String(240), nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    consent: Mapped[bool] = mapped_column(Boolean, nullable=False)

    email_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )

    # Request metadata
    ip: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String(512), nullable=True)

    def __repr__(self) -> str:
        return f"<EventRegistration {self.event_key!r} {self.email!r}>"

"""Initial schema: admin accounts, token blacklist and content tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:30:00

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

CARD_ICONS = ("Brain", "Zap", "MessageSquare", "Lightbulb", "Cog", "Shield", "Globe", "Users")
CARD_BADGES = ("", "Popular", "Featured", "New", "Enterprise")
CARD_COLORS = ("primary", "secondary", "accent")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "admin_users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("username", sa.String(20), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_admin_users_username", "admin_users", ["username"], unique=True)
    op.create_index("ix_admin_users_email", "admin_users", ["email"], unique=True)

    op.create_table(
        "token_blacklist",
        sa.Column("token", sa.String(1024), primary_key=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_token_blacklist_created_at", "token_blacklist", ["created_at"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("slug", sa.String(160), nullable=False),
        sa.Column("summary", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "category",
            sa.Enum(
                "Industry Insights",
                "Technical Guide",
                "Business Strategy",
                "AI Ethics",
                "Workplace Innovation",
                "Healthcare AI",
                "Leadership",
                name="article_category",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("author_name", sa.String(60), nullable=False),
        sa.Column(
            "status",
            sa.Enum("draft", "published", "archived", name="article_status", create_constraint=True),
            nullable=False,
            server_default="draft",
        ),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "featured_badge_text",
            sa.String(40),
            nullable=False,
            server_default="Featured Article",
        ),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("read_time_minutes", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("time_spent_seconds", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("engaged_sessions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_engaged_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("seo_title", sa.String(70), nullable=True),
        sa.Column("seo_description", sa.String(160), nullable=True),
    )
    op.create_index("ix_articles_slug", "articles", ["slug"], unique=True)
    op.create_index("ix_articles_category", "articles", ["category"])
    op.create_index("ix_articles_status", "articles", ["status"])
    op.create_index("ix_articles_published_at", "articles", ["published_at"])
    op.create_index(
        "ix_articles_category_status_published",
        "articles",
        ["category", "status", "published_at"],
    )

    op.create_table(
        "event_registrations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("event_key", sa.Text(), nullable=False),
        sa.Column("event_title", sa.String(200), nullable=False),
        sa.Column("full_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.Column("company", sa.String(160), nullable=True),
        sa.Column("location", sa.String(160), nullable=True),
        sa.Column("address", sa.String(240), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("consent", sa.Boolean(), nullable=False),
        sa.Column("email_sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("ip", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.UniqueConstraint("event_key", "email", name="uq_event_registrations_event_email"),
    )
    op.create_index("ix_event_registrations_event_key", "event_registrations", ["event_key"])
    op.create_index("ix_event_registrations_event_title", "event_registrations", ["event_title"])
    op.create_index("ix_event_registrations_email_sent", "event_registrations", ["email_sent"])
    op.create_index(
        "ix_event_registrations_submitted_at", "event_registrations", ["submitted_at"]
    )

    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("phone", sa.String(10), nullable=False, unique=True),
        sa.Column("company_name", sa.String(30), nullable=False),
        sa.Column("country", sa.String(30), nullable=False),
        sa.Column("job_title", sa.String(30), nullable=False),
        sa.Column("messages", sa.JSON(), nullable=False),
    )
    op.create_index("ix_contacts_name", "contacts", ["name"])
    op.create_index("ix_contacts_email", "contacts", ["email"], unique=True)
    op.create_index("ix_contacts_company_name", "contacts", ["company_name"])
    op.create_index("ix_contacts_country", "contacts", ["country"])

    op.create_table(
        "feedback",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("company_name", sa.String(30), nullable=False),
        sa.Column("job_title", sa.String(30), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.String(500), nullable=False),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_feedback_name", "feedback", ["name"])
    op.create_index("ix_feedback_is_approved", "feedback", ["is_approved"])
    op.create_index("ix_feedback_submitted_at", "feedback", ["submitted_at"])

    op.create_table(
        "events",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column(
            "kind",
            sa.Enum("upcoming", "past", name="event_kind", create_constraint=True),
            nullable=False,
            server_default="upcoming",
        ),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("date", sa.String(100), nullable=False),
        sa.Column("time", sa.String(100), nullable=False, server_default=""),
        sa.Column("location", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("audience", sa.String(200), nullable=False, server_default=""),
        sa.Column(
            "status",
            sa.Enum(
                "confirmed", "hosting", "tentative", name="event_status", create_constraint=True
            ),
            nullable=False,
            server_default="confirmed",
        ),
        sa.Column("topics", sa.JSON(), nullable=False),
        sa.Column("outcome", sa.Text(), nullable=False, server_default=""),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("banner_filename", sa.String(255), nullable=True),
        sa.Column("banner_path", sa.String(1024), nullable=True),
        sa.Column("banner_mime", sa.String(100), nullable=True),
        sa.Column("banner_size", sa.Integer(), nullable=True),
    )
    op.create_index("ix_events_kind", "events", ["kind"])

    card_icon = sa.Enum(*CARD_ICONS, name="card_icon", create_constraint=True)
    card_badge = sa.Enum(*CARD_BADGES, name="card_badge", create_constraint=True)
    card_color = sa.Enum(*CARD_COLORS, name="card_color", create_constraint=True)

    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("icon", card_icon, nullable=False),
        sa.Column("company_name", sa.String(300), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "duration",
            sa.Enum(
                *[f"{n} Month" for n in range(1, 12)],
                "1 Year",
                "1 and Half Year",
                "2 Years",
                name="project_duration",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column(
            "team_size",
            sa.Enum(
                *[f"{n} specialists" for n in range(1, 21)],
                name="project_team_size",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("key_results", sa.JSON(), nullable=False),
        sa.Column("technologies_used", sa.JSON(), nullable=False),
        sa.Column("badge", card_badge, nullable=False, server_default=""),
        sa.Column("color", card_color, nullable=False, server_default="primary"),
        sa.Column(
            "process",
            sa.Enum("Completed", "Ongoing", name="project_process", create_constraint=True),
            nullable=False,
            server_default="Completed",
        ),
        sa.Column("dates", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_projects_is_active", "projects", ["is_active"])

    op.create_table(
        "solutions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("icon", card_icon, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("features", sa.JSON(), nullable=False),
        sa.Column("badge", card_badge, nullable=False, server_default=""),
        sa.Column("color", card_color, nullable=False, server_default="primary"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_solutions_is_active", "solutions", ["is_active"])

    op.create_table(
        "gallery_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_timestamps(),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column(
            "category",
            sa.Enum(
                "Conference",
                "Client_Visit",
                "Internal_Event",
                "Demo",
                "Recognition",
                "Partnership",
                "Keynote",
                "Milestone",
                "Office_Launch",
                name="gallery_category",
                create_constraint=True,
            ),
            nullable=False,
            server_default="Conference",
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "media_type",
            sa.Enum("image", "video", name="media_type", create_constraint=True),
            nullable=False,
            server_default="image",
        ),
        sa.Column("image_filename", sa.String(255), nullable=False),
        sa.Column("image_path", sa.String(1024), nullable=False),
        sa.Column("image_mime", sa.String(100), nullable=True),
        sa.Column("image_size", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(120), nullable=False, server_default=""),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_gallery_items_date", "gallery_items", ["date"])


def downgrade() -> None:
    for table in (
        "gallery_items",
        "solutions",
        "projects",
        "events",
        "feedback",
        "contacts",
        "event_registrations",
        "articles",
        "token_blacklist",
        "admin_users",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_name in (
        "media_type",
        "gallery_category",
        "project_process",
        "project_team_size",
        "project_duration",
        "card_color",
        "card_badge",
        "card_icon",
        "event_status",
        "event_kind",
        "article_status",
        "article_category",
    ):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)

"""create_link_tables

Revision ID: f1a2b3c4d567
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "f1a2b3c4d567"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _timestamps() -> list[sa.Column]:
    # Columns from TimestampMixin
    return [
        _created_at(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Apply migration - create user, session, link and click tables."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_app_user_username"), "app_user", ["username"], unique=True)
    op.create_index(op.f("ix_app_user_email"), "app_user", ["email"], unique=True)

    op.create_table(
        "auth_session",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_index(op.f("ix_auth_session_user_id"), "auth_session", ["user_id"], unique=False)
    op.create_index(op.f("ix_auth_session_token_hash"), "auth_session", ["token_hash"], unique=True)
    op.create_index(op.f("ix_auth_session_expires_at"), "auth_session", ["expires_at"], unique=False)

    op.create_table(
        "shortlink",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("original_url", sa.Text(), nullable=False),
        sa.Column("short_code", sa.String(length=32), nullable=False),
        sa.Column("custom_alias", sa.String(length=64), nullable=True),
        sa.Column("clicks", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default="true", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("custom_alias"),
        sa.CheckConstraint("clicks >= 0", name="ck_shortlink_clicks_non_negative"),
    )
    op.create_index(op.f("ix_shortlink_user_id"), "shortlink", ["user_id"], unique=False)
    op.create_index(op.f("ix_shortlink_short_code"), "shortlink", ["short_code"], unique=True)

    op.create_table(
        "link_list",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_index(op.f("ix_link_list_user_id"), "link_list", ["user_id"], unique=False)

    op.create_table(
        "link_list_item",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("list_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("position", sa.Integer(), server_default="0", nullable=False),
        sa.Column("clicks", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["list_id"], ["link_list.id"], ondelete="CASCADE"),
        sa.CheckConstraint("clicks >= 0", name="ck_link_list_item_clicks_non_negative"),
    )
    op.create_index(op.f("ix_link_list_item_list_id"), "link_list_item", ["list_id"], unique=False)
    op.create_index(
        "ix_link_list_item_list_position", "link_list_item", ["list_id", "position"], unique=False
    )

    op.create_table(
        "click_event",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("shortlink_id", sa.Integer(), nullable=True),
        sa.Column("list_item_id", sa.Integer(), nullable=True),
        sa.Column(
            "clicked_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["shortlink_id"], ["shortlink.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["list_item_id"], ["link_list_item.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "(shortlink_id IS NULL) <> (list_item_id IS NULL)",
            name="ck_click_event_single_target",
        ),
    )
    op.create_index(op.f("ix_click_event_shortlink_id"), "click_event", ["shortlink_id"], unique=False)
    op.create_index(op.f("ix_click_event_list_item_id"), "click_event", ["list_item_id"], unique=False)
    op.create_index(op.f("ix_click_event_clicked_at"), "click_event", ["clicked_at"], unique=False)


def downgrade() -> None:
    """Revert migration - drop all link tables."""
    op.drop_index(op.f("ix_click_event_clicked_at"), table_name="click_event")
    op.drop_index(op.f("ix_click_event_list_item_id"), table_name="click_event")
    op.drop_index(op.f("ix_click_event_shortlink_id"), table_name="click_event")
    op.drop_table("click_event")

    op.drop_index("ix_link_list_item_list_position", table_name="link_list_item")
    op.drop_index(op.f("ix_link_list_item_list_id"), table_name="link_list_item")
    op.drop_table("link_list_item")

    op.drop_index(op.f("ix_link_list_user_id"), table_name="link_list")
    op.drop_table("link_list")

    op.drop_index(op.f("ix_shortlink_short_code"), table_name="shortlink")
    op.drop_index(op.f("ix_shortlink_user_id"), table_name="shortlink")
    op.drop_table("shortlink")

    op.drop_index(op.f("ix_auth_session_expires_at"), table_name="auth_session")
    op.drop_index(op.f("ix_auth_session_token_hash"), table_name="auth_session")
    op.drop_index(op.f("ix_auth_session_user_id"), table_name="auth_session")
    op.drop_table("auth_session")

    op.drop_index(op.f("ix_app_user_email"), table_name="app_user")
    op.drop_index(op.f("ix_app_user_username"), table_name="app_user")
    op.drop_table("app_user")

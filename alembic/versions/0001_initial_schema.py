"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Creates all tables for the event planner:
users, contacts, events, event_invitations, event_reminders.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

rsvp_status = sa.Enum("pending", "attending", "maybe", "declined", name="rsvpstatus")
reminder_type = sa.Enum("email", "sms", "notification", name="remindertype")
reminder_status = sa.Enum("pending", "sent", "failed", "cancelled", name="reminderstatus")
reminder_recipient = sa.Enum("all_invitees", "attending_only", "creator_only", name="reminderrecipient")


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("default_timezone", sa.String(50), nullable=False, server_default="UTC"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- contacts ---
    op.create_table(
        "contacts",
        sa.Column("contact_id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("birth_month", sa.Integer, nullable=True),
        sa.Column("birth_day", sa.Integer, nullable=True),
        sa.Column("birth_year", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_contacts_user_id", "contacts", ["user_id"])

    # --- events ---
    op.create_table(
        "events",
        sa.Column("event_id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_events_user_id", "events", ["user_id"])

    # --- event_invitations ---
    op.create_table(
        "event_invitations",
        sa.Column("invitation_id", sa.String(36), primary_key=True),
        sa.Column("event_id", sa.String(36), sa.ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False),
        sa.Column("contact_id", sa.String(36), sa.ForeignKey("contacts.contact_id", ondelete="CASCADE"), nullable=False),
        sa.Column("rsvp_status", rsvp_status, nullable=False, server_default="pending"),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("response_note", sa.Text, nullable=True),
        sa.Column("is_manual_response", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("event_id", "contact_id", name="uq_event_invitations_event_contact"),
    )
    op.create_index("ix_event_invitations_event_id", "event_invitations", ["event_id"])
    op.create_index("ix_event_invitations_contact_id", "event_invitations", ["contact_id"])

    # --- event_reminders ---
    op.create_table(
        "event_reminders",
        sa.Column("reminder_id", sa.String(36), primary_key=True),
        sa.Column("event_id", sa.String(36), sa.ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False),
        sa.Column("reminder_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reminder_type", reminder_type, nullable=False, server_default="email"),
        sa.Column("status", reminder_status, nullable=False, server_default="pending"),
        sa.Column("recipient_type", reminder_recipient, nullable=False, server_default="all_invitees"),
        sa.Column("custom_message", sa.Text, nullable=True),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("error_message", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_event_reminders_event_id", "event_reminders", ["event_id"])
    op.create_index("ix_event_reminders_user_id", "event_reminders", ["user_id"])


def downgrade() -> None:
    op.drop_table("event_reminders")
    op.drop_table("event_invitations")
    op.drop_table("events")
    op.drop_table("contacts")
    op.drop_table("users")
    bind = op.get_bind()
    for enum_type in (reminder_recipient, reminder_status, reminder_type, rsvp_status):
        enum_type.drop(bind, checkfirst=True)

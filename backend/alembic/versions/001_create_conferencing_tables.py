"""Create conferencing tables

Revision ID: 001
Revises: None
Create Date: 2024-11-15 19:46:33.000000+00:00

What:  Creates conferences, recordings, sessions and participants.
How:   BIGINT identities; foreign keys ON DELETE RESTRICT ON UPDATE CASCADE;
       an index on every foreign key column and on conferences.tenantId.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Row creation time (UTC); the webhook backfills the recording start",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            comment="Last mutation time (UTC); strictly increasing per row",
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "conferences",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("host_user_id", sa.BigInteger(), nullable=False),
        sa.Column("tenantId", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_conferences_tenant_id", "conferences", ["tenantId"])

    op.create_table(
        "recordings",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("conference_id", sa.BigInteger(), nullable=False),
        sa.Column("tenantId", sa.Integer(), nullable=False),
        sa.Column(
            "file_path",
            sa.Text(),
            nullable=False,
            comment="Storage path or URL of the recording in object storage",
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["conference_id"], ["conferences.id"],
            ondelete="RESTRICT", onupdate="CASCADE",
        ),
    )
    op.create_index("idx_recordings_conference_id", "recordings", ["conference_id"])

    op.create_table(
        "sessions",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("conference_id", sa.BigInteger(), nullable=False),
        sa.Column("session_name", sa.Text(), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=True),
        sa.Column("recording_url", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("duration_seconds", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "file_size_mb",
            sa.Numeric(10, 2),
            nullable=False,
            server_default=sa.text("0"),
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["conference_id"], ["conferences.id"],
            ondelete="RESTRICT", onupdate="CASCADE",
        ),
    )
    op.create_index("idx_sessions_conference_id", "sessions", ["conference_id"])

    op.create_table(
        "participants",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("join_time", sa.DateTime(), nullable=False),
        sa.Column("leave_time", sa.DateTime(), nullable=False),
        sa.Column("duration_seconds", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["session_id"], ["sessions.id"],
            ondelete="RESTRICT", onupdate="CASCADE",
        ),
    )
    op.create_index("idx_participants_session_id", "participants", ["session_id"])


def downgrade() -> None:
    """Drop dependents first; RESTRICT foreign keys block the reverse order."""
    op.drop_index("idx_participants_session_id", table_name="participants")
    op.drop_table("participants")
    op.drop_index("idx_sessions_conference_id", table_name="sessions")
    op.drop_table("sessions")
    op.drop_index("idx_recordings_conference_id", table_name="recordings")
    op.drop_table("recordings")
    op.drop_index("idx_conferences_tenant_id", table_name="conferences")
    op.drop_table("conferences")

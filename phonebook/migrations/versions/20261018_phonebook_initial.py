"""Initial phonebook schema: users, verification attempts, contact edges.

Revision ID: 20261018_phonebook_initial
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_phonebook_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "user",
        sa.Column("key", sa.String(length=32), primary_key=True),
        sa.Column("number", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("number", name="uq_user_number"),
    )

    op.create_table(
        "verification_attempt",
        sa.Column("key", sa.String(length=32), primary_key=True),
        sa.Column("number", sa.String(length=32), nullable=False),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_verification_attempt_created_at", "verification_attempt", ["created_at"])
    op.create_index("ix_verification_attempt_number", "verification_attempt", ["number"])

    op.create_table(
        "contact_edge",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("from_key", sa.String(length=32), sa.ForeignKey("user.key"), nullable=False),
        sa.Column("to_key", sa.String(length=32), sa.ForeignKey("user.key"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("from_key", "to_key", name="uq_contact_edge_from_to"),
    )
    op.create_index("ix_contact_edge_to_key", "contact_edge", ["to_key"])


def downgrade():
    op.drop_index("ix_contact_edge_to_key", table_name="contact_edge")
    op.drop_table("contact_edge")
    op.drop_index("ix_verification_attempt_number", table_name="verification_attempt")
    op.drop_index("ix_verification_attempt_created_at", table_name="verification_attempt")
    op.drop_table("verification_attempt")
    op.drop_table("user")

"""create_esg_connect_tables

Revision ID: 5b2e91c4d7a0
Revises:
Create Date: 2026-10-12 10:41:07.218554
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2e91c4d7a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # ACCOUNTS
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default="investor"),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "role IN ('superadmin', 'admin', 'business_owner', 'investor')",
            name="ck_account_role_valid",
        ),
    )
    op.create_index("ix_accounts_id", "accounts", ["id"])
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_role", "accounts", ["role"])

    # POSTS
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("business_name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("industry", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("investment_needed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_by",
            sa.Integer(),
            sa.ForeignKey("accounts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column(
            "approved_by",
            sa.Integer(),
            sa.ForeignKey("accounts.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_post_status_valid",
        ),
        sa.CheckConstraint("investment_needed >= 0", name="ck_investment_needed_non_negative"),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_posts_created_by", "posts", ["created_by"])
    op.create_index("ix_posts_status", "posts", ["status"])
    op.create_index("ix_posts_created_at", "posts", ["created_at"])
    op.create_index("ix_posts_status_created", "posts", ["status", "created_at"])

    # SAVED BUSINESSES
    op.create_table(
        "saved_businesses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("investor_id", sa.Integer(), sa.ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("business_id", sa.Integer(), sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("business_name", sa.String(), nullable=True),
        sa.Column("industry", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("investment_needed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("investor_id", "business_id", name="uq_saved_investor_business"),
    )
    op.create_index("ix_saved_businesses_id", "saved_businesses", ["id"])
    op.create_index("ix_saved_businesses_investor_id", "saved_businesses", ["investor_id"])
    op.create_index("ix_saved_businesses_business_id", "saved_businesses", ["business_id"])

    # INTERESTS
    op.create_table(
        "interests",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("investor_id", sa.Integer(), sa.ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("business_id", sa.Integer(), sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("business_name", sa.String(), nullable=True),
        sa.Column("industry", sa.String(), nullable=True),
        sa.Column("contact_name", sa.String(), nullable=True),
        sa.Column("contact_email", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="Pending"),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("date_interested", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("investor_id", "business_id", name="uq_interest_investor_business"),
        sa.CheckConstraint(
            "status IN ('Pending', 'Contacted', 'In Discussion', 'Declined', 'Invested')",
            name="ck_interest_status_valid",
        ),
    )
    op.create_index("ix_interests_id", "interests", ["id"])
    op.create_index("ix_interests_investor_id", "interests", ["investor_id"])
    op.create_index("ix_interests_business_id", "interests", ["business_id"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("interests")
    op.drop_table("saved_businesses")
    op.drop_table("posts")
    op.drop_table("accounts")

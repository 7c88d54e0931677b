"""wallet links and saved squads

Revision ID: 20261019000100
Revises: 
Create Date: 2026-10-19 00:01:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019000100"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "wallet_links",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("twitter_id", sa.String(), nullable=False),
        sa.Column("twitter_username", sa.String(), nullable=False, server_default=""),
        sa.Column("wallet_address", sa.String(), nullable=False),
        sa.Column("topstrike_username", sa.String(), nullable=True),
        sa.Column(
            "linked_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
    )
    op.create_index("ix_wallet_links_id", "wallet_links", ["id"], unique=False)
    op.create_index("ix_wallet_links_twitter_id", "wallet_links", ["twitter_id"], unique=True)

    op.create_table(
        "saved_squads",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("wallet_address", sa.String(), nullable=False),
        sa.Column("formation", sa.String(), nullable=False),
        sa.Column("assigned_players_json", sa.Text(), nullable=False, server_default="{}"),
        sa.Column("saved_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_saved_squads_id", "saved_squads", ["id"], unique=False)
    op.create_index(
        "ix_saved_squads_wallet_address", "saved_squads", ["wallet_address"], unique=True
    )


def downgrade() -> None:
    op.drop_index("ix_saved_squads_wallet_address", table_name="saved_squads")
    op.drop_index("ix_saved_squads_id", table_name="saved_squads")
    op.drop_table("saved_squads")
    op.drop_index("ix_wallet_links_twitter_id", table_name="wallet_links")
    op.drop_index("ix_wallet_links_id", table_name="wallet_links")
    op.drop_table("wallet_links")

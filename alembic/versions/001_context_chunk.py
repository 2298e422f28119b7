"""Context chunk table with pgvector embedding and JSONB entities/metadata.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# text-embedding-3-small
EMBEDDING_DIMENSIONS = 1536


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    op.create_table(
        "context_chunk",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("source", sa.String(32), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "entities",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("topic", sa.String(64), nullable=True),
        sa.Column("embedding", Vector(EMBEDDING_DIMENSIONS), nullable=True),
        sa.Column(
            "metadata",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_context_chunk_timestamp", "context_chunk", [sa.text("timestamp DESC")])
    op.create_index("ix_context_chunk_source", "context_chunk", ["source"])
    op.create_index("ix_context_chunk_topic", "context_chunk", ["topic"])


def downgrade() -> None:
    op.drop_index("ix_context_chunk_topic", table_name="context_chunk")
    op.drop_index("ix_context_chunk_source", table_name="context_chunk")
    op.drop_index("ix_context_chunk_timestamp", table_name="context_chunk")
    op.drop_table("context_chunk")

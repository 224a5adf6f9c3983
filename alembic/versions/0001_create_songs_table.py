"""create songs table

Revision ID: 0001
Revises:
Create Date: 2024-11-02 12:00:00

"""
from typing import Sequence, Union

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # DuckDB / PostgreSQL の両方で動くようにシーケンスで採番する
    op.execute("CREATE SEQUENCE IF NOT EXISTS seq_songs_id START 1")
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS songs (
            id INTEGER PRIMARY KEY DEFAULT nextval('seq_songs_id'),
            group_name VARCHAR NOT NULL,
            song_name VARCHAR NOT NULL,
            release_date DATE,
            text TEXT DEFAULT '',
            youtube_link VARCHAR DEFAULT '',
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def downgrade() -> None:
    raise NotImplementedError("migrations are forward-only")

"""add_localized_content_columns

Revision ID: 8c3d7e4f1a20
Revises: 5e1f0c2a9b41
Create Date: 2026-10-02 09:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8c3d7e4f1a20"
down_revision: Union[str, None] = "5e1f0c2a9b41"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (table, JSONB column, legacy column prefix)
_LOCALIZED_COLUMNS = (
    ("projects", "name", "title"),
    ("projects", "description", "desc"),
    ("tasks", "title", "title"),
    ("tasks", "description", "desc"),
)


def upgrade() -> None:
    for table, column, prefix in _LOCALIZED_COLUMNS:
        op.add_column(
            table,
            sa.Column(column, postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        )
        # Existing rows are copied verbatim from the legacy columns, unlocked
        op.execute(
            f"""
            UPDATE {table}
            SET {column} = jsonb_build_object(
                'en', COALESCE({prefix}_en, ''),
                'uz', COALESCE({prefix}_uz, ''),
                'ja', COALESCE({prefix}_jp, ''),
                'translation_locked', false
            )
            WHERE {column} IS NULL
            """
        )


def downgrade() -> None:
    for table, column, _prefix in reversed(_LOCALIZED_COLUMNS):
        op.drop_column(table, column)

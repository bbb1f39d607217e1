"""create_domains_table

Revision ID: 3b9e2c71d4a0
Revises:
Create Date: 2026-10-18 10:12:44.310562

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b9e2c71d4a0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create domains table (idempotent - safe when init_db() already created it)
    from sqlalchemy import inspect

    bind = op.get_bind()
    inspector = inspect(bind)

    if 'domains' not in inspector.get_table_names():
        op.create_table('domains',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('root_content_id', sa.Integer(), nullable=True),
            sa.Column('language_iso_code', sa.String(length=14), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name')
        )

    inspector = inspect(bind)
    existing_indexes = [idx['name'] for idx in inspector.get_indexes('domains')]

    if 'idx_domains_root_content_id' not in existing_indexes:
        op.create_index('idx_domains_root_content_id', 'domains', ['root_content_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_domains_root_content_id', table_name='domains')
    op.drop_table('domains')

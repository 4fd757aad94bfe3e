"""create settings and weekly_logs tables

Revision ID: 5d1c2e7a9b30
Revises:
Create Date: 2025-11-03 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d1c2e7a9b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'settings' not in tables:
        op.create_table(
            'settings',
            sa.Column('name', sa.String(64), primary_key=True, nullable=False),
            sa.Column('numeric_value', sa.Numeric(12, 4), nullable=True),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        )
        op.create_index('ix_settings_name', 'settings', ['name'])
    if 'weekly_logs' not in tables:
        op.create_table(
            'weekly_logs',
            sa.Column('id', sa.String(36), primary_key=True, nullable=False),
            sa.Column('week_start', sa.Date(), nullable=False),
            sa.Column('hourly_rate', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('hours', sa.JSON(), nullable=False),
            sa.Column('extras', sa.JSON(), nullable=False),
            sa.Column('inserted_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        )
        op.create_index('ix_weekly_logs_week_start', 'weekly_logs', ['week_start'], unique=True)


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS weekly_logs')
    op.execute('DROP TABLE IF EXISTS settings')

"""Create the single records table for the SQL backend.

Revision ID: 001_records
Revises: None
Create Date: 2026-10-19

One row per freight record keyed by integer identity; date indexed so
month and range queries do not scan the whole table.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_records'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'records',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('date', sa.String(32), nullable=True),
        sa.Column('vehicle_number', sa.String(64), nullable=True),
        sa.Column('city', sa.String(128), nullable=True),
        sa.Column('destination', sa.String(128), nullable=True),
        sa.Column('weight_in_tons', sa.Float(), nullable=True),
        sa.Column('rate_per_ton', sa.Float(), nullable=True),
        sa.Column('amount_spend', sa.Float(), nullable=True),
        sa.Column('rate_we_fixed', sa.Float(), nullable=True),
        sa.Column('extra_spend', sa.Float(), nullable=True),
        sa.Column('total_profit', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_records_date', 'records', ['date'])


def downgrade() -> None:
    op.drop_index('ix_records_date', table_name='records')
    op.drop_table('records')

"""Add pen_transfers and health_records

Revision ID: 8b2d4e6f1a93
Revises: 3f1c9a7e2b40
Create Date: 2026-10-19 14:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b2d4e6f1a93'
down_revision: Union[str, Sequence[str], None] = '3f1c9a7e2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create pen transfer history and health record tables."""

    # --- pen_transfers ---
    op.create_table(
        'pen_transfers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('pig_id', sa.Uuid(), nullable=False),
        sa.Column('from_pen_id', sa.Uuid(), nullable=True),
        sa.Column('to_pen_id', sa.Uuid(), nullable=False),
        sa.Column('reason', sa.String(length=32), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('transferred_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['pig_id'], ['pigs.id']),
        sa.ForeignKeyConstraint(['from_pen_id'], ['pens.id']),
        sa.ForeignKeyConstraint(['to_pen_id'], ['pens.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_pen_transfers_farm_pig', 'pen_transfers', ['farm_id', 'pig_id', 'transferred_at'],
        unique=False,
    )

    # --- health_records ---
    op.create_table(
        'health_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('pig_id', sa.Uuid(), nullable=False),
        sa.Column('event_type', sa.String(length=32), nullable=False),
        sa.Column('occurred_on', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('next_due', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('veterinarian', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.ForeignKeyConstraint(['pig_id'], ['pigs.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_health_records_farm_pig', 'health_records', ['farm_id', 'pig_id', 'occurred_on'],
        unique=False,
        postgresql_where=sa.text('deleted_at IS NULL'),
    )
    op.create_index(
        'ix_health_records_open_due', 'health_records', ['farm_id', 'next_due'],
        unique=False,
        postgresql_where=sa.text("status <> 'completed' AND deleted_at IS NULL"),
    )


def downgrade() -> None:
    """Drop pen transfer history and health record tables."""
    op.drop_index('ix_health_records_open_due', table_name='health_records')
    op.drop_index('ix_health_records_farm_pig', table_name='health_records')
    op.drop_table('health_records')
    op.drop_index('ix_pen_transfers_farm_pig', table_name='pen_transfers')
    op.drop_table('pen_transfers')

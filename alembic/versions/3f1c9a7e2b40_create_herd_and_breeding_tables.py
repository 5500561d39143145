"""Create pens, pigs, breeding_records and overdue_birth_notifications

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create herd and breeding tables."""

    # --- pens ---
    op.create_table(
        'pens',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('row_name', sa.String(length=128), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('is_occupied', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('farm_id', 'name', name='ux_pens_farm_name'),
    )
    op.create_index('ix_pens_farm_id', 'pens', ['farm_id'], unique=False)

    # --- pigs ---
    op.create_table(
        'pigs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('tag', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('gender', sa.String(length=6), nullable=False),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('color', sa.String(length=64), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('pen_id', sa.Uuid(), nullable=True),
        sa.Column('parent_male_id', sa.Uuid(), nullable=True),
        sa.Column('parent_female_id', sa.Uuid(), nullable=True),
        sa.Column('is_pregnant', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('pregnancy_start_date', sa.Date(), nullable=True),
        sa.Column('expected_birth_date', sa.Date(), nullable=True),
        sa.Column('actual_birth_date', sa.Date(), nullable=True),
        sa.Column('mated_with', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='active', nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.ForeignKeyConstraint(['pen_id'], ['pens.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('farm_id', 'tag', name='ux_pigs_farm_tag'),
    )
    op.create_index('ix_pigs_farm_id', 'pigs', ['farm_id'], unique=False)
    op.create_index('ix_pigs_farm_gender', 'pigs', ['farm_id', 'gender'], unique=False)

    # --- breeding_records ---
    op.create_table(
        'breeding_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('boar_id', sa.Uuid(), nullable=True),
        sa.Column('sow_name', sa.String(length=255), nullable=True),
        sa.Column('boar_name', sa.String(length=255), nullable=True),
        sa.Column('mating_date', sa.Date(), nullable=False),
        sa.Column('expected_birth_date', sa.Date(), nullable=False),
        sa.Column('actual_birth_date', sa.Date(), nullable=True),
        sa.Column('number_of_piglets', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.ForeignKeyConstraint(['sow_id'], ['pigs.id']),
        sa.ForeignKeyConstraint(['boar_id'], ['pigs.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_breeding_records_farm_mating', 'breeding_records', ['farm_id', 'mating_date'],
        unique=False,
    )
    op.create_index(
        'ix_breeding_records_farm_sow', 'breeding_records', ['farm_id', 'sow_id'],
        unique=False,
    )

    # --- overdue_birth_notifications ---
    op.create_table(
        'overdue_birth_notifications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('pig_id', sa.String(length=64), nullable=False),
        sa.Column('notified_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('farm_id', 'pig_id', name='ux_overdue_birth_farm_pig'),
    )
    op.create_index(
        'ix_overdue_birth_notifications_farm_id', 'overdue_birth_notifications', ['farm_id'],
        unique=False,
    )


def downgrade() -> None:
    """Drop herd and breeding tables."""
    op.drop_index('ix_overdue_birth_notifications_farm_id', table_name='overdue_birth_notifications')
    op.drop_table('overdue_birth_notifications')
    op.drop_index('ix_breeding_records_farm_sow', table_name='breeding_records')
    op.drop_index('ix_breeding_records_farm_mating', table_name='breeding_records')
    op.drop_table('breeding_records')
    op.drop_index('ix_pigs_farm_gender', table_name='pigs')
    op.drop_index('ix_pigs_farm_id', table_name='pigs')
    op.drop_table('pigs')
    op.drop_index('ix_pens_farm_id', table_name='pens')
    op.drop_table('pens')

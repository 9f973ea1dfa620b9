"""Create users, classrooms and reservations

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3a7c1e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('role', sa.String(9), nullable=False),
        *_audit_columns(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'classrooms',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('type', sa.String(10), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('building', sa.String(100), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_classrooms_room_number', 'classrooms', ['room_number'], unique=True)

    op.create_table(
        'reservations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=True),
        sa.Column('end_time', sa.String(5), nullable=True),
        sa.Column('purpose', sa.Text(), nullable=True),
        sa.Column('status', sa.String(9), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('classroom_id', sa.String(36), sa.ForeignKey('classrooms.id', ondelete='SET NULL'), nullable=True),
        *_audit_columns(),
    )
    op.create_index('ix_reservations_date', 'reservations', ['date'])
    op.create_index('ix_reservations_status', 'reservations', ['status'])
    op.create_index('ix_reservations_user_id', 'reservations', ['user_id'])
    op.create_index('ix_reservations_classroom_id', 'reservations', ['classroom_id'])


def downgrade() -> None:
    op.drop_table('reservations')
    op.drop_index('ix_classrooms_room_number', table_name='classrooms')
    op.drop_table('classrooms')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

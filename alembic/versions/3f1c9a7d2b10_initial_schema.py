"""initial schema

Revision ID: 3f1c9a7d2b10
Revises: 
Create Date: 2026-10-19 18:52:03.114820

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'moods',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'sleeps',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('hours', sa.Float(), nullable=False),
        sa.Column('quality', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('did_exercise', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'diets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('food_choices', sa.JSON(), nullable=False),
        sa.Column('water_intake', sa.String(), nullable=False),
        *_timestamps(),
    )
    for table in ('moods', 'sleeps', 'exercises', 'diets'):
        op.create_index(f'ix_{table}_id', table, ['id'])

    op.create_table(
        'daily_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('mood_id', sa.Integer(), sa.ForeignKey('moods.id'), nullable=False, unique=True),
        sa.Column('sleep_id', sa.Integer(), sa.ForeignKey('sleeps.id'), nullable=True, unique=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=True, unique=True),
        sa.Column('diet_id', sa.Integer(), sa.ForeignKey('diets.id'), nullable=True, unique=True),
        *_timestamps(),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_daily_entries_id', 'daily_entries', ['id'])
    op.create_index('ix_daily_entries_user_id', 'daily_entries', ['user_id'])
    op.create_index('ix_daily_entries_date', 'daily_entries', ['date'])

    op.create_table(
        'task_boards',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('week_start_date', sa.Date(), nullable=False),
        sa.Column('week_end_date', sa.Date(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_task_boards_id', 'task_boards', ['id'])
    op.create_index('ix_task_boards_user_id', 'task_boards', ['user_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('task_board_id', sa.Integer(), sa.ForeignKey('task_boards.id'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_tasks_id', 'tasks', ['id'])
    op.create_index('ix_tasks_board_status_order', 'tasks', ['task_board_id', 'status', 'order'])


def downgrade() -> None:
    op.drop_table('tasks')
    op.drop_table('task_boards')
    op.drop_table('daily_entries')
    op.drop_table('diets')
    op.drop_table('exercises')
    op.drop_table('sleeps')
    op.drop_table('moods')
    op.drop_table('users')

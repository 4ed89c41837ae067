"""initial schema: users, pregnancies, baby development and tracking logs

Revision ID: 5f2c1d9e7a10
Revises:
Create Date: 2024-03-02 18:12:44.501337
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5f2c1d9e7a10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated=True):
    cols = [sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if updated:
        cols.append(sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False))
    return cols


def _owner_columns():
    return [
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('pregnancy_id', sa.Integer(), nullable=True),
    ]


def _owner_constraints():
    return [
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pregnancy_id'], ['pregnancies.id'], ondelete='SET NULL'),
    ]


def _owner_indexes(table):
    op.create_index(f'ix_{table}_user_id', table, ['user_id'])
    op.create_index(f'ix_{table}_pregnancy_id', table, ['pregnancy_id'])


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=80), nullable=False),
        sa.Column('last_name', sa.String(length=80), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=40), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('city', sa.String(length=120), nullable=True),
        sa.Column('blood_type', sa.String(length=5), nullable=True),
        sa.Column('allergies', sa.Text(), nullable=True),
        sa.Column('medical_conditions', sa.Text(), nullable=True),
        sa.Column('emergency_contact', sa.String(length=120), nullable=True),
        sa.Column('emergency_phone', sa.String(length=40), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'pregnancies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('last_menstrual_period', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('anchor_kind', sa.String(length=10), nullable=False),
        sa.Column('pre_pregnancy_weight', sa.Float(), nullable=True),
        sa.Column('current_weight', sa.Float(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_pregnancies_user_id', 'pregnancies', ['user_id'])

    op.create_table(
        'baby_development',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('size_comparison', sa.String(length=80), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('length_cm', sa.Float(), nullable=True),
        sa.Column('weight_grams', sa.Float(), nullable=True),
        sa.Column('milestones', sa.JSON(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_baby_development_week', 'baby_development', ['week'], unique=True)

    op.create_table(
        'weight_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('weight_entries')

    op.create_table(
        'diary_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('mood', sa.String(length=40), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('diary_entries')

    op.create_table(
        'appointments',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.String(length=5), nullable=False),
        sa.Column('type', sa.String(length=60), nullable=False),
        sa.Column('doctor', sa.String(length=120), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        *_timestamps(),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('appointments')

    op.create_table(
        'kick_counters',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('kick_count', sa.Integer(), nullable=False),
        sa.Column('time_started', sa.DateTime(timezone=True), nullable=True),
        sa.Column('time_ended', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('kick_counters')

    op.create_table(
        'symptoms',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('symptom_type', sa.String(length=60), nullable=False),
        sa.Column('severity', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('remedies', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('symptoms')

    op.create_table(
        'shopping_items',
        sa.Column('id', sa.Integer(), nullable=False),
        *_owner_columns(),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=True),
        sa.Column('priority', sa.String(length=10), nullable=False),
        sa.Column('is_purchased', sa.Boolean(), nullable=False),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('store', sa.String(length=120), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        *_owner_constraints(),
        sa.PrimaryKeyConstraint('id'),
    )
    _owner_indexes('shopping_items')


def downgrade():
    for table in ('shopping_items', 'symptoms', 'kick_counters', 'appointments',
                  'diary_entries', 'weight_entries'):
        op.drop_index(f'ix_{table}_pregnancy_id', table_name=table)
        op.drop_index(f'ix_{table}_user_id', table_name=table)
        op.drop_table(table)
    op.drop_index('ix_baby_development_week', table_name='baby_development')
    op.drop_table('baby_development')
    op.drop_index('ix_pregnancies_user_id', table_name='pregnancies')
    op.drop_table('pregnancies')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

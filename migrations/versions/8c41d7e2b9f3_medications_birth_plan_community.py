"""medications with dose log, birth plans and community board

Revision ID: 8c41d7e2b9f3
Revises: 5f2c1d9e7a10
Create Date: 2024-03-16 10:41:07.218904
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '8c41d7e2b9f3'
down_revision = '5f2c1d9e7a10'
branch_labels = None
depends_on = None


def _created_at():
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def _updated_at():
    return sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade():
    op.create_table(
        'medications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('pregnancy_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('dosage', sa.String(length=80), nullable=True),
        sa.Column('frequency', sa.String(length=40), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('prescribed_by', sa.String(length=120), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pregnancy_id'], ['pregnancies.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_medications_user_id', 'medications', ['user_id'])
    op.create_index('ix_medications_pregnancy_id', 'medications', ['pregnancy_id'])

    op.create_table(
        'medication_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('medication_id', sa.Integer(), nullable=False),
        sa.Column('taken_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('skipped', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['medication_id'], ['medications.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_medication_log_medication_id', 'medication_log', ['medication_id'])

    op.create_table(
        'birth_plans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('pregnancy_id', sa.Integer(), nullable=True),
        sa.Column('preferred_hospital', sa.String(length=200), nullable=True),
        sa.Column('preferred_doctor', sa.String(length=120), nullable=True),
        sa.Column('birth_type', sa.String(length=40), nullable=True),
        sa.Column('pain_management', sa.String(length=40), nullable=True),
        sa.Column('labor_preferences', sa.JSON(), nullable=False),
        sa.Column('birth_preferences', sa.JSON(), nullable=False),
        sa.Column('emergency_contacts', sa.JSON(), nullable=False),
        sa.Column('special_instructions', sa.Text(), nullable=True),
        sa.Column('music_playlist', sa.JSON(), nullable=False),
        sa.Column('birthing_tools', sa.JSON(), nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pregnancy_id'], ['pregnancies.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_birth_plans_user_id', 'birth_plans', ['user_id'], unique=True)
    op.create_index('ix_birth_plans_pregnancy_id', 'birth_plans', ['pregnancy_id'])

    op.create_table(
        'community_posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.Column('likes_count', sa.Integer(), nullable=False),
        sa.Column('replies_count', sa.Integer(), nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_community_posts_user_id', 'community_posts', ['user_id'])

    op.create_table(
        'community_replies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('post_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.Column('likes_count', sa.Integer(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['post_id'], ['community_posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_community_replies_post_id', 'community_replies', ['post_id'])
    op.create_index('ix_community_replies_user_id', 'community_replies', ['user_id'])

    op.create_table(
        'community_likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('post_id', sa.Integer(), nullable=True),
        sa.Column('reply_id', sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['post_id'], ['community_posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['reply_id'], ['community_replies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'post_id', name='uq_community_likes_user_post'),
        sa.UniqueConstraint('user_id', 'reply_id', name='uq_community_likes_user_reply'),
    )
    op.create_index('ix_community_likes_user_id', 'community_likes', ['user_id'])


def downgrade():
    op.drop_index('ix_community_likes_user_id', table_name='community_likes')
    op.drop_table('community_likes')
    op.drop_index('ix_community_replies_user_id', table_name='community_replies')
    op.drop_index('ix_community_replies_post_id', table_name='community_replies')
    op.drop_table('community_replies')
    op.drop_index('ix_community_posts_user_id', table_name='community_posts')
    op.drop_table('community_posts')
    op.drop_index('ix_birth_plans_pregnancy_id', table_name='birth_plans')
    op.drop_index('ix_birth_plans_user_id', table_name='birth_plans')
    op.drop_table('birth_plans')
    op.drop_index('ix_medication_log_medication_id', table_name='medication_log')
    op.drop_table('medication_log')
    op.drop_index('ix_medications_pregnancy_id', table_name='medications')
    op.drop_index('ix_medications_user_id', table_name='medications')
    op.drop_table('medications')

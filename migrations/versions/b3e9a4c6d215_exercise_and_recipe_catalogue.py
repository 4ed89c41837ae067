"""exercise and recipe catalogue

Revision ID: b3e9a4c6d215
Revises: 8c41d7e2b9f3
Create Date: 2024-03-21 15:02:44.615230
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'b3e9a4c6d215'
down_revision = '8c41d7e2b9f3'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('video_url', sa.String(length=500), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('difficulty', sa.String(length=10), nullable=True),
        sa.Column('trimester', sa.String(length=10), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=True),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('ingredients', sa.JSON(), nullable=False),
        sa.Column('instructions', sa.JSON(), nullable=False),
        sa.Column('prep_time', sa.Integer(), nullable=True),
        sa.Column('cook_time', sa.Integer(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.Column('category', sa.String(length=20), nullable=True),
        sa.Column('nutrition_benefits', sa.Text(), nullable=True),
        sa.Column('trimester', sa.String(length=10), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title'),
    )


def downgrade():
    op.drop_table('recipes')
    op.drop_table('exercises')

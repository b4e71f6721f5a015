"""create articles table

Revision ID: 0001_create_articles
Revises: 
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_create_articles'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'articles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('article_id', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column('language', sa.String(length=16), nullable=True),
        sa.Column('summary_short', sa.Text(), nullable=True),
        sa.Column('summary_long', sa.Text(), nullable=True),
        sa.Column('keywords', sa.JSON(none_as_null=True), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default=sa.text("'pending'")),
        sa.Column('run_id', sa.String(length=36), nullable=True),
        sa.Column('attempt', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('error', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('idx_articles_article_id', 'articles', ['article_id'], unique=True)
    op.create_index('idx_articles_status', 'articles', ['status'])


def downgrade() -> None:
    op.drop_index('idx_articles_status', table_name='articles')
    op.drop_index('idx_articles_article_id', table_name='articles')
    op.drop_table('articles')

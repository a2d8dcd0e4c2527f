"""initial schema: users, categories, books, reviews, bookmarks

Revision ID: 20241120_0001
Revises:
Create Date: 2024-11-20
"""
from alembic import op
import sqlalchemy as sa

revision = '20241120_0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(255), nullable=True),
        sa.Column('last_name', sa.String(255), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # promotion_status starts with a default so existing rows get 'None';
    # the default is dropped in 20241120_0004
    op.create_table(
        'books',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('book', sa.String(255), nullable=False, unique=True),
        sa.Column('title', sa.Text, nullable=False),
        sa.Column('author', sa.String(255), nullable=True),
        sa.Column('condition', sa.String(255), nullable=False),
        sa.Column('promotion_status', sa.String(20), nullable=False, server_default='None'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'book_categories',
        sa.Column('book_id', sa.Uuid(), sa.ForeignKey('books.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('category_id', sa.Integer, sa.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'reviews',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('book_id', sa.Uuid(), sa.ForeignKey('books.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('body', sa.Text, nullable=False),
        sa.Column('rating', sa.SmallInteger, nullable=False),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_reviews_rating_range'),
    )
    op.create_index('ix_reviews_book_id', 'reviews', ['book_id'])
    op.create_index('ix_reviews_user_id', 'reviews', ['user_id'])
    op.create_index('ix_reviews_published_at', 'reviews', ['published_at'])

    op.create_table(
        'bookmarks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('book_id', sa.Uuid(), sa.ForeignKey('books.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('bookmarked_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'book_id', name='uq_bookmarks_user_book'),
    )
    op.create_index('ix_bookmarks_book_id', 'bookmarks', ['book_id'])
    op.create_index('ix_bookmarks_user_id', 'bookmarks', ['user_id'])


def downgrade() -> None:
    op.drop_table('bookmarks')
    op.drop_table('reviews')
    op.drop_table('book_categories')
    op.drop_table('books')
    op.drop_table('categories')
    op.drop_index('ix_users_email', 'users')
    op.drop_table('users')

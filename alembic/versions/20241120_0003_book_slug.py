"""add books.slug, backfilled as 'book-' || id

Revision ID: 20241120_0003
Revises: 20241120_0002
Create Date: 2024-11-20
"""
from alembic import op
import sqlalchemy as sa

revision = '20241120_0003'
down_revision = '20241120_0002'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column('books', sa.Column('slug', sa.String(255), nullable=True))
    op.execute("UPDATE books SET slug = 'book-' || CAST(id AS VARCHAR(36))")
    with op.batch_alter_table('books') as batch_op:
        batch_op.alter_column('slug', existing_type=sa.String(255), nullable=False)
    op.create_index('ix_books_slug', 'books', ['slug'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_books_slug', 'books')
    with op.batch_alter_table('books') as batch_op:
        batch_op.drop_column('slug')

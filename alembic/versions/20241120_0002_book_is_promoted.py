"""add books.is_promoted

Revision ID: 20241120_0002
Revises: 20241120_0001
Create Date: 2024-11-20
"""
from alembic import op
import sqlalchemy as sa

revision = '20241120_0002'
down_revision = '20241120_0001'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        'books',
        sa.Column('is_promoted', sa.Boolean, nullable=False, server_default=sa.false()),
    )
    # Existing rows: keep the flag consistent with promotion_status
    op.execute("UPDATE books SET is_promoted = (promotion_status <> 'None')")


def downgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.drop_column('is_promoted')

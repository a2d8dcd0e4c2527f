"""drop the server default on books.promotion_status

Every write now supplies the tier explicitly.

Revision ID: 20241120_0004
Revises: 20241120_0003
Create Date: 2024-11-20
"""
from alembic import op
import sqlalchemy as sa

revision = '20241120_0004'
down_revision = '20241120_0003'
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.alter_column(
            'promotion_status',
            existing_type=sa.String(20),
            existing_nullable=False,
            server_default=None,
        )


def downgrade() -> None:
    with op.batch_alter_table('books') as batch_op:
        batch_op.alter_column(
            'promotion_status',
            existing_type=sa.String(20),
            existing_nullable=False,
            server_default='None',
        )

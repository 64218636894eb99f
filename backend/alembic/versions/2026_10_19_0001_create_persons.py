"""create persons table

Revision ID: 0001_persons
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers
revision: str = '0001_persons'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'persons',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        # json array of skill strings
        sa.Column('skills', sa.String(length=2000), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # substring search on name
    op.create_index('ix_persons_name', 'persons', ['name'])


def downgrade() -> None:
    op.drop_index('ix_persons_name', table_name='persons')
    op.drop_table('persons')

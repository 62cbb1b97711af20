"""create dog_breeds table

Revision ID: 0001_create_dog_breeds
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_dog_breeds'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'dog_breeds',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('breed_group', sa.String(length=50), nullable=False),
        sa.Column('temperament', sa.String(length=200), nullable=False),
        sa.Column('life_span', sa.String(length=50), nullable=False),
        sa.Column('height_min_cm', sa.Integer(), nullable=False),
        sa.Column('height_max_cm', sa.Integer(), nullable=False),
        sa.Column('weight_min_kg', sa.Float(), nullable=False),
        sa.Column('weight_max_kg', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_dog_breeds'),
        sa.UniqueConstraint('name', name='uq_dog_breeds_name'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('dog_breeds')

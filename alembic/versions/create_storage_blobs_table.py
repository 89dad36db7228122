"""create storage_blobs table

Revision ID: create_storage_blobs_table
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_storage_blobs_table'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'storage_blobs',
        sa.Column('key', sa.String(length=100), primary_key=True),
        sa.Column('value', sa.Text, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )

def downgrade():
    op.drop_table('storage_blobs')

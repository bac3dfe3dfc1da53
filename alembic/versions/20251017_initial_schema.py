"""Initial schema for reports table

Revision ID: 001_initial
Revises:
Create Date: 2025-10-17 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create reports table."""
    op.create_table(
        'reports',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ref', sa.String(length=36), nullable=False),
        sa.Column('imei', sa.String(length=15), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('brand', sa.String(length=100), nullable=True),
        sa.Column('model', sa.String(length=100), nullable=True),
        sa.Column('color', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('lost_date', sa.String(length=50), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('contact_name', sa.String(length=255), nullable=True),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('contact_phone', sa.String(length=50), nullable=True),
        sa.Column('police_report', sa.String(length=100), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("status IN ('lost', 'stolen', 'recovered')", name='ck_reports_status'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('ref')
    )

    # Indexes for the public lookup and admin listing paths
    op.create_index(op.f('ix_reports_imei'), 'reports', ['imei'], unique=False)
    op.create_index(op.f('ix_reports_is_public'), 'reports', ['is_public'], unique=False)
    op.create_index(op.f('ix_reports_created_at'), 'reports', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop reports table."""
    op.drop_index(op.f('ix_reports_created_at'), table_name='reports')
    op.drop_index(op.f('ix_reports_is_public'), table_name='reports')
    op.drop_index(op.f('ix_reports_imei'), table_name='reports')
    op.drop_table('reports')

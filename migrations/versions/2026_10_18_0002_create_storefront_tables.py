"""Create pc_builds, promotions and bundles tables

Revision ID: 0002_create_storefront_tables
Revises: 0001_create_catalog_tables
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql as psql


# revision identifiers, used by Alembic.
revision = '0002_create_storefront_tables'
down_revision = '0001_create_catalog_tables'
branch_labels = None
depends_on = None

JSON = sa.JSON().with_variant(psql.JSONB(), "postgresql")


def upgrade():
    op.create_table(
        'pc_builds',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('components', JSON, nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_pc_builds_user_id', 'pc_builds', ['user_id'])

    op.create_table(
        'promotions',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('code', sa.String(), nullable=False, unique=True),
        sa.Column('discount_percent', sa.Numeric(5, 2), nullable=False, server_default='0'),
        sa.Column('discount_amount', sa.Numeric(10, 2), nullable=True),
        sa.Column('min_purchase', sa.Numeric(10, 2), nullable=True),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('applies_to', JSON, nullable=False),
    )

    op.create_table(
        'bundles',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('products', JSON, nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('discounted_price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )


def downgrade():
    op.drop_table('bundles')
    op.drop_table('promotions')
    op.drop_index('ix_pc_builds_user_id', table_name='pc_builds')
    op.drop_table('pc_builds')

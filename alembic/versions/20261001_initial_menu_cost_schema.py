"""initial_menu_cost_schema

Revision ID: 20261001_initial
Revises:
Create Date: 2026-10-01

Catalog (categories, products, kits), menu types, daily menus with their
ingredient and kit line items, and user profiles with roles.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    # Catalog
    op.create_table(
        'categories',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category_id', sa.String(), sa.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True),
        sa.Column('unit', sa.String(), nullable=False),
        sa.Column('price', sa.Numeric(12, 4), nullable=False, server_default='0'),
        sa.Column('price_updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('idx_products_name', 'products', ['name'])
    op.create_index('idx_products_category', 'products', ['category_id'])

    op.create_table(
        'kits',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('price', sa.Numeric(12, 4), nullable=False, server_default='0'),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    # Menus
    op.create_table(
        'menu_types',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'daily_menus',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('menu_date', sa.Date(), nullable=False),
        sa.Column('menu_type_id', sa.String(), sa.ForeignKey('menu_types.id'), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('total_cost', sa.Numeric(12, 4), nullable=False, server_default='0'),
        sa.Column('created_by', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('menu_date', 'menu_type_id', name='uq_daily_menu_date_type'),
    )
    op.create_index('idx_daily_menus_date', 'daily_menus', ['menu_date'])
    op.create_index('idx_daily_menus_type', 'daily_menus', ['menu_type_id', 'menu_date'])

    op.create_table(
        'menu_ingredients',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('menu_id', sa.String(), sa.ForeignKey('daily_menus.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.String(), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('per_capita', sa.Numeric(12, 4), nullable=False),
        sa.Column('cost', sa.Numeric(12, 4), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('idx_menu_ingredients_menu', 'menu_ingredients', ['menu_id'])

    op.create_table(
        'menu_kits',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('menu_id', sa.String(), sa.ForeignKey('daily_menus.id', ondelete='CASCADE'), nullable=False),
        sa.Column('kit_id', sa.String(), sa.ForeignKey('kits.id'), nullable=False),
        sa.Column('cost', sa.Numeric(12, 4), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('menu_id', 'kit_id', name='uq_menu_kit'),
    )
    op.create_index('idx_menu_kits_menu', 'menu_kits', ['menu_id'])

    # Users
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'user_roles',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_role'),
    )
    op.create_index('idx_user_roles_user', 'user_roles', ['user_id'])


def downgrade():
    op.drop_index('idx_user_roles_user', table_name='user_roles')
    op.drop_table('user_roles')
    op.drop_table('profiles')
    op.drop_index('idx_menu_kits_menu', table_name='menu_kits')
    op.drop_table('menu_kits')
    op.drop_index('idx_menu_ingredients_menu', table_name='menu_ingredients')
    op.drop_table('menu_ingredients')
    op.drop_index('idx_daily_menus_type', table_name='daily_menus')
    op.drop_index('idx_daily_menus_date', table_name='daily_menus')
    op.drop_table('daily_menus')
    op.drop_table('menu_types')
    op.drop_table('kits')
    op.drop_index('idx_products_category', table_name='products')
    op.drop_index('idx_products_name', table_name='products')
    op.drop_table('products')
    op.drop_table('categories')

"""baseline schema - users and orders

Revision ID: 001_baseline
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = '001_baseline'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('role', sa.String(50), nullable=False, server_default='User'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    # Orders table
    op.create_table('orders',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('order_code', sa.String(100), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Posted'),
        sa.Column('customer_name', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(50), nullable=False),
        sa.Column('pickup_start', sa.String(10), nullable=True),
        sa.Column('pickup_end', sa.String(10), nullable=True),
        sa.Column('dispatch_day', sa.String(10), nullable=True),
        sa.Column('booking_date', sa.String(10), nullable=True),
        sa.Column('broker_fee', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('user_email', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_orders_order_code', 'orders', ['order_code'])
    op.create_index('ix_orders_status', 'orders', ['status'])
    op.create_index('ix_orders_dispatch_day', 'orders', ['dispatch_day'])
    op.create_index('ix_orders_user_id', 'orders', ['user_id'])
    op.create_index('ix_orders_created_at', 'orders', ['created_at'])


def downgrade():
    op.drop_table('orders')
    op.drop_table('users')

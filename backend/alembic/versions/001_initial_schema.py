"""Initial InnFlow schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

Property singleton, rooms, seasonal rates, bookings, audit log,
notifications, cash-ups, staff directory, tenants and sessions.
Booking totals are whole currency units (INTEGER).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    'userrole': ('DEVELOPER', 'BUSINESS_ADMIN', 'STAFF', 'GUEST'),
    'roomstatus': ('ACTIVE', 'MAINTENANCE', 'BLOCKED'),
    'bookingstatus': ('PROVISIONAL', 'CONFIRMED', 'CHECKED_IN', 'CHECKED_OUT', 'CANCELLED'),
    'paymentstatus': ('PENDING', 'PARTIALLY_PAID', 'PAID', 'REFUNDED'),
    'paymentmethod': ('IKHOKHA', 'EFT', 'CASH_ON_ARRIVAL', 'CARD_ON_ARRIVAL'),
    'deliverystatus': ('DELIVERED', 'FAILED', 'SIMULATED'),
    'notificationchannel': ('WHATSAPP',),
    'tenantstatus': ('ACTIVE', 'TRIALING', 'SUSPENDED'),
    'tenantplan': ('STARTER', 'PROFESSIONAL', 'ENTERPRISE'),
    'auditaction': (
        'BOOKING_CREATED', 'BOOKING_STATUS_CHANGE', 'PAYMENT_STATUS_CHANGE', 'BOOKING_DELETED',
        'WHATSAPP_DISPATCH', 'FINANCIAL_EXPORT', 'FINANCIAL_CASH_UP', 'SETTINGS_UPDATED',
        'ROOM_CREATED', 'ROOM_UPDATED', 'ROOM_DELETED',
        'STAFF_CREATED', 'STAFF_UPDATED', 'STAFF_REMOVED',
        'TENANT_CREATED', 'TENANT_UPDATED',
    ),
}


def enum(name: str) -> sa.Enum:
    return sa.Enum(*ENUMS[name], name=name)


def property_fk() -> sa.Column:
    return sa.Column(
        'property_id', sa.Uuid(),
        sa.ForeignKey('properties.id', ondelete='CASCADE'),
        nullable=False, index=True,
    )


def upgrade() -> None:
    # === PROPERTIES ===
    op.create_table(
        'properties',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(500), nullable=False, server_default=''),
        sa.Column('contact_email', sa.String(255), nullable=False, server_default=''),
        sa.Column('contact_phone', sa.String(50), nullable=False, server_default=''),
        sa.Column('staff_whatsapp', sa.String(50), nullable=False, server_default=''),
        sa.Column('check_in_time', sa.String(5), nullable=False, server_default='14:00'),
        sa.Column('check_out_time', sa.String(5), nullable=False, server_default='10:00'),
        sa.Column('primary_color', sa.String(7), nullable=False, server_default='#3B82F6'),
        sa.Column('logo_url', sa.String(500), nullable=True),
        sa.Column('header_image_url', sa.String(500), nullable=True),
        sa.Column('whatsapp_template', sa.Text(), nullable=False),
        sa.Column('webhook_url', sa.String(500), nullable=True),
        sa.Column('layout_grid', sa.JSON(), nullable=False),
        sa.Column('last_ref_number', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('last_ref_number >= 0', name='ck_properties_last_ref_number_non_negative'),
    )

    # === SEASONAL RATES ===
    op.create_table(
        'seasonal_rates',
        sa.Column('id', sa.Uuid(), primary_key=True),
        property_fk(),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('multiplier', sa.Numeric(6, 3), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('multiplier >= 0', name='ck_seasonal_rates_multiplier_non_negative'),
    )

    # === ROOMS ===
    op.create_table(
        'rooms',
        sa.Column('id', sa.Uuid(), primary_key=True),
        property_fk(),
        sa.Column('room_number', sa.String(20), nullable=False),
        sa.Column('room_type', sa.String(100), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('price_per_night', sa.Numeric(12, 2), nullable=False),
        sa.Column('status', enum('roomstatus'), nullable=False, index=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('capacity >= 1', name='ck_rooms_capacity_positive'),
        sa.CheckConstraint('price_per_night >= 0', name='ck_rooms_price_non_negative'),
    )

    # === BOOKINGS === (room_id has no FK: deleted rooms leave bookings in place)
    op.create_table(
        'bookings',
        sa.Column('id', sa.Uuid(), primary_key=True),
        property_fk(),
        sa.Column('reference', sa.String(32), nullable=False, unique=True, index=True),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('guest_email', sa.String(255), nullable=False, server_default=''),
        sa.Column('guest_phone', sa.String(50), nullable=False, server_default=''),
        sa.Column('guest_count', sa.Integer(), nullable=True),
        sa.Column('guest_id_number', sa.String(50), nullable=True),
        sa.Column('room_id', sa.Uuid(), nullable=False, index=True),
        sa.Column('check_in_date', sa.Date(), nullable=False),
        sa.Column('check_out_date', sa.Date(), nullable=False),
        sa.Column('total_amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', enum('bookingstatus'), nullable=False, index=True),
        sa.Column('payment_status', enum('paymentstatus'), nullable=False),
        sa.Column('payment_method', enum('paymentmethod'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('check_out_date > check_in_date', name='ck_bookings_stay_has_nights'),
    )
    op.create_index('ix_bookings_room_dates', 'bookings', ['room_id', 'check_in_date', 'check_out_date'])

    # === AUDIT LOG ===
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        property_fk(),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('actor', sa.String(255), nullable=False),
        sa.Column('action', enum('auditaction'), nullable=False, index=True),
        sa.Column('details', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    # === NOTIFICATIONS ===
    op.create_table(
        'notification_records',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        property_fk(),
        sa.Column('booking_id', sa.Uuid(), nullable=True),
        sa.Column('channel', enum('notificationchannel'), nullable=False),
        sa.Column('recipient', sa.String(50), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', enum('deliverystatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    # === CASH-UPS ===
    op.create_table(
        'cash_up_records',
        sa.Column('id', sa.Uuid(), primary_key=True),
        property_fk(),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('cash', sa.Numeric(12, 2), nullable=False),
        sa.Column('card', sa.Numeric(12, 2), nullable=False),
        sa.Column('eft', sa.Numeric(12, 2), nullable=False),
        sa.Column('total', sa.Numeric(12, 2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        sa.Column('reconciled_by', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    # === STAFF / SESSIONS / TENANTS ===
    op.create_table(
        'staff_members',
        sa.Column('id', sa.Uuid(), primary_key=True),
        property_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('role', enum('userrole'), nullable=False),
        sa.Column('access', sa.JSON(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('property_id', sa.Uuid(), sa.ForeignKey('properties.id', ondelete='CASCADE'), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('role', enum('userrole'), nullable=False),
        sa.Column('session_token', sa.String(128), nullable=True, unique=True, index=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'tenants',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('status', enum('tenantstatus'), nullable=False),
        sa.Column('plan', enum('tenantplan'), nullable=False),
        sa.Column('users', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('tenants')
    op.drop_table('users')
    op.drop_table('staff_members')
    op.drop_table('cash_up_records')
    op.drop_table('notification_records')
    op.drop_table('audit_log')
    op.drop_index('ix_bookings_room_dates')
    op.drop_table('bookings')
    op.drop_table('rooms')
    op.drop_table('seasonal_rates')
    op.drop_table('properties')

    bind = op.get_bind()
    for name in ENUMS:
        sa.Enum(name=name).drop(bind, checkfirst=True)

"""initial schema: events, bookings, rooming lists, links and users

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-06-02 10:14:37.512204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

rooming_list_status_enum = sa.Enum('Active', 'Closed', 'Cancelled', name='rooming_list_status_enum')
agreement_type_enum = sa.Enum('leisure', 'staff', 'artist', name='agreement_type_enum')


def upgrade():
    op.create_table(
        'events',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('event_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('event_id')
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email')
    )

    op.create_table(
        'bookings',
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('guest_name', sa.String(length=255), nullable=False),
        sa.Column('guest_email', sa.String(length=255), nullable=True),
        sa.Column('guest_phone_number', sa.String(length=20), nullable=True),
        sa.Column('check_in_date', sa.Date(), nullable=False),
        sa.Column('check_out_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('check_out_date > check_in_date', name='check_booking_dates_order'),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id']),
        sa.PrimaryKeyConstraint('booking_id')
    )
    with op.batch_alter_table('bookings', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_bookings_event_id'), ['event_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_bookings_hotel_id'), ['hotel_id'], unique=False)

    op.create_table(
        'rooming_lists',
        sa.Column('rooming_list_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        sa.Column('rfp_name', sa.String(length=255), nullable=False),
        sa.Column('cut_off_date', sa.Date(), nullable=False),
        sa.Column('status', rooming_list_status_enum, nullable=False),
        sa.Column('agreement_type', agreement_type_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id']),
        sa.PrimaryKeyConstraint('rooming_list_id')
    )
    with op.batch_alter_table('rooming_lists', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_rooming_lists_event_id'), ['event_id'], unique=False)

    op.create_table(
        'rooming_list_bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('rooming_list_id', sa.Integer(), nullable=False),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.booking_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['rooming_list_id'], ['rooming_lists.rooming_list_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('rooming_list_id', 'booking_id', name='uq_rooming_list_booking')
    )
    with op.batch_alter_table('rooming_list_bookings', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_rooming_list_bookings_booking_id'), ['booking_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_rooming_list_bookings_rooming_list_id'), ['rooming_list_id'], unique=False)


def downgrade():
    with op.batch_alter_table('rooming_list_bookings', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_rooming_list_bookings_rooming_list_id'))
        batch_op.drop_index(batch_op.f('ix_rooming_list_bookings_booking_id'))
    op.drop_table('rooming_list_bookings')

    with op.batch_alter_table('rooming_lists', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_rooming_lists_event_id'))
    op.drop_table('rooming_lists')

    with op.batch_alter_table('bookings', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_bookings_hotel_id'))
        batch_op.drop_index(batch_op.f('ix_bookings_event_id'))
    op.drop_table('bookings')

    op.drop_table('users')
    op.drop_table('events')

    bind = op.get_bind()
    agreement_type_enum.drop(bind, checkfirst=True)
    rooming_list_status_enum.drop(bind, checkfirst=True)

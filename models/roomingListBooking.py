# models/roomingListBooking.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from db.extensions import db
from datetime import datetime


class RoomingListBooking(db.Model):
    __tablename__ = 'rooming_list_bookings'

    id = Column(Integer, primary_key=True)
    rooming_list_id = Column(
        Integer,
        ForeignKey('rooming_lists.rooming_list_id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    booking_id = Column(
        Integer,
        ForeignKey('bookings.booking_id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint('rooming_list_id', 'booking_id', name='uq_rooming_list_booking'),
    )

    def __repr__(self):
        return f"<RoomingListBooking rooming_list_id={self.rooming_list_id} booking_id={self.booking_id}>"

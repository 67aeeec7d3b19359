# models/booking.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, CheckConstraint
from db.extensions import db
from datetime import datetime


class Booking(db.Model):
    __tablename__ = 'bookings'

    booking_id = Column(Integer, primary_key=True)
    hotel_id = Column(Integer, nullable=False, index=True)
    event_id = Column(Integer, ForeignKey('events.event_id'), nullable=False, index=True)
    guest_name = Column(String(255), nullable=False)
    guest_email = Column(String(255), nullable=True)
    guest_phone_number = Column(String(20), nullable=True)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint('check_out_date > check_in_date', name='check_booking_dates_order'),
    )

    def __repr__(self):
        return f"<Booking booking_id={self.booking_id} guest_name='{self.guest_name}'>"

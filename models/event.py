# models/event.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from db.extensions import db
from datetime import datetime


class Event(db.Model):
    __tablename__ = 'events'

    event_id = Column(Integer, primary_key=True)
    event_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Event event_id={self.event_id} event_name='{self.event_name}'>"

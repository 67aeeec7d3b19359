# models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from db.extensions import db
from datetime import datetime


class User(db.Model):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    # Werkzeug salted hash, never the plaintext
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"User(id={self.id}, username='{self.username}')"

# app/models/user.py
"""
Users table: one row per registered email.
Password column holds a bcrypt hash only, never the plaintext.
Created by identity_service on first login with a display name.
"""

from sqlalchemy import Column, String, DateTime
from app.database import Base, utc_now
from app.utils.object_id import new_object_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(200))
    email = Column(String(320), unique=True, nullable=False, index=True)
    password = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self):
        return f"<User {self.id} email={self.email}>"

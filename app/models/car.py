# app/models/car.py
"""
Cars table: vehicles owned by users.
user_id is indexed but carries no foreign key: ownership is checked by
car_service (optionally), not by the database.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base, utc_now
from app.utils.object_id import new_object_id


class Car(Base):
    __tablename__ = "cars"

    id = Column(String(24), primary_key=True, default=new_object_id)
    user_id = Column(String(24), nullable=False, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self):
        return f"<Car {self.id} {self.year} {self.make} {self.model} owner={self.user_id}>"

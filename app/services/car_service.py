# app/services/car_service.py
"""
Vehicle registry: cars stored per owning user.
Used by the cars router.
"""

from sqlalchemy.orm import Session
from app.config import settings
from app.exceptions import BadRequestError, NotFoundError
from app.models.car import Car
from app.models.user import User
from app.utils.logger import get_logger
from app.utils.object_id import is_valid_object_id

logger = get_logger(__name__)

INVALID_USER_ID = "Invalid or missing User ID provided. Please log in again."
UNKNOWN_OWNER = "User not found. Please log in again."


def is_valid_user_id(user_id) -> bool:
    """False for missing ids, the literal "undefined" a JS client sends, and malformed ids."""
    if not user_id or user_id == "undefined":
        return False
    return is_valid_object_id(user_id)


def list_cars(db: Session, user_id) -> list[Car]:
    """All cars owned by user_id, oldest first. Invalid ids yield an empty list."""
    if not is_valid_user_id(user_id):
        return []
    user_id = user_id.lower()
    return (
        db.query(Car)
        .filter(Car.user_id == user_id)
        .order_by(Car.created_at.asc(), Car.id.asc())
        .all()
    )


def add_car(db: Session, make: str, model: str, year: int, user_id) -> Car:
    if not is_valid_user_id(user_id):
        raise BadRequestError(INVALID_USER_ID)
    user_id = user_id.lower()   # ids are case-insensitive hex; stored lowercase

    if settings.ENFORCE_CAR_OWNER_EXISTS:
        if db.query(User.id).filter(User.id == user_id).first() is None:
            raise NotFoundError(UNKNOWN_OWNER)

    car = Car(user_id=user_id, make=make, model=model, year=year)
    db.add(car)
    db.commit()
    db.refresh(car)
    logger.info(f"Car added: {car.id} ({car.year} {car.make} {car.model}) owner={car.user_id}")
    return car

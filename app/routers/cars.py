# app/routers/cars.py
"""Vehicle registry: list and add cars for a user."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.exceptions import InternalError, ServiceError
from app.schemas.car import CarCreate, CarOut
from app.services.car_service import add_car, list_cars
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/cars/{user_id}", response_model=list[CarOut], summary="List a user's cars")
def get_cars(user_id: str, db: Session = Depends(get_db)):
    """Always 200. Unknown or malformed user ids return an empty list."""
    try:
        return list_cars(db, user_id)
    except Exception as e:
        logger.error(f"Error fetching cars for {user_id}: {e}", exc_info=True)
        raise InternalError("Error fetching cars")


@router.post("/cars", response_model=CarOut, status_code=status.HTTP_201_CREATED, summary="Add a car")
def create_car(body: CarCreate, db: Session = Depends(get_db)):
    try:
        return add_car(db, body.make, body.model, body.year, body.user_id)
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Error adding car for {body.user_id}: {e}", exc_info=True)
        raise InternalError("Error adding car")

# app/routers/auth.py
"""Login-or-register endpoint. 200 for an existing user, 201 when the request registered one."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.exceptions import InternalError, ServiceError
from app.schemas.user import LoginRequest, LoginResponse, UserSummary
from app.services.identity_service import AuthOutcome, authenticate_or_register
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/auth/login", response_model=LoginResponse, summary="Log in, or register when a name is supplied")
def login(body: LoginRequest, response: Response, db: Session = Depends(get_db)):
    try:
        result = authenticate_or_register(db, body.email, body.password, body.name)
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Login error for {body.email}: {e}", exc_info=True)
        raise InternalError("Server error")

    if result.outcome == AuthOutcome.CREATED:
        response.status_code = status.HTTP_201_CREATED
        message = "User registered"
    else:
        message = "Login successful"
    return LoginResponse(message=message, user=UserSummary.from_user(result.user))

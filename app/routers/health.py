# app/routers/health.py
"""
Liveness + health endpoints.
GET /           : plain text liveness message.
GET /api/health : backend + DB connectivity.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.utils.logger import get_logger
from datetime import datetime

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root():
    return "Digital Mechanic API is running..."


@router.get("/api/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "database": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        logger.error(f"Health check: database unreachable: {e}")
        result["database"] = "error"
        result["status"] = "degraded"

    return result

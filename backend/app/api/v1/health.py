from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from app.core.db import get_session
from app.core.logging_config import get_logger
from app.models import Person
from datetime import datetime, timezone

router = APIRouter()
logger = get_logger(__name__)

@router.get("/")
def health_check():
    """basic liveness check"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "people-api"
    }

@router.get("/ready")
def readiness_check(session: Session = Depends(get_session)):
    """readiness check - verifies the data store answers"""
    checks = {}
    all_healthy = True

    # check database
    try:
        session.exec(select(Person).limit(1))
        checks["database"] = {"status": "healthy", "message": "connected"}
    except SQLAlchemyError as e:
        logger.warning(f"readiness check: database unavailable: {e}")
        checks["database"] = {"status": "unhealthy", "message": str(e)}
        all_healthy = False

    return {
        "status": "healthy" if all_healthy else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks
    }

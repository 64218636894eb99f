from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from person_api.core.db import get_session, check_database
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("")
def readiness_check(session: Session = Depends(get_session)):
    """healthy only if the database answers a query"""
    try:
        check_database(session)
        database = {"status": "healthy", "message": "connected"}
        healthy = True
    except SQLAlchemyError as e:
        logger.error(f"database health check failed: {e}")
        database = {"status": "unhealthy", "message": str(e)}
        healthy = False

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {"database": database},
        },
    )

@router.get("/live")
def liveness_check():
    """basic liveness check, doesn't touch the database"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "person-api"
    }

"""
Health check endpoint
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime, timezone

from insect_shop import __version__
from insect_shop.database import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request, db: Session = Depends(get_db)):
    """
    Health check endpoint
    
    Returns service health status including:
    - Service status
    - Database connectivity
    - Timestamp
    """
    # Check database connection
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"
    
    return {
        "service": request.app.state.settings.SERVICE_NAME,
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "database": db_status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root(request: Request):
    """Root endpoint"""
    return {
        "service": request.app.state.settings.SERVICE_NAME,
        "version": __version__,
        "docs": "/docs"
    }

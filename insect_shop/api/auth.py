"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from insect_shop.database import get_db
from insect_shop.services.user_service import UserService
from insect_shop.schemas.user import (
    UserRegister,
    UserLogin,
    AuthenticatedUser,
    UserResponse
)

router = APIRouter(prefix="/auth", tags=["auth"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Register user")
def register(
    user_data: UserRegister,
    service: UserService = Depends(get_user_service)
):
    """
    Register a new user
    
    - **username**: Username (required, unique, max 25 characters)
    - **password**: Password (required, at least 5 characters)
    - **email**: Email address (required)
    - **isAdmin**: Admin flag (optional, default false)
    """
    return service.register(user_data)


@router.post("/login", response_model=AuthenticatedUser, summary="Authenticate user")
def login(
    credentials: UserLogin,
    service: UserService = Depends(get_user_service)
):
    """
    Check a username and password
    
    Returns the user's username, email and admin flag.
    """
    return service.authenticate(credentials)

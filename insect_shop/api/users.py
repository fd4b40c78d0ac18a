"""
User API endpoints
"""
from fastapi import APIRouter, Depends, status

from insect_shop.api.auth import get_user_service
from insect_shop.services.user_service import UserService
from insect_shop.schemas.user import (
    UserUpdate,
    UserResponse,
    UserDetailResponse,
    UserListResponse
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse, summary="Get all users")
def get_users(service: UserService = Depends(get_user_service)):
    """Retrieve all users ordered by username"""
    return service.get_all_users()


@router.get("/{username}", response_model=UserDetailResponse, summary="Get user")
def get_user(
    username: str,
    service: UserService = Depends(get_user_service)
):
    """
    Retrieve a user with their orders
    
    - **username**: Username
    """
    return service.get_user(username)


@router.patch("/{username}", response_model=UserResponse, summary="Update user")
def update_user(
    username: str,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """
    Update a user
    
    Fields can be: username, password, isAdmin
    
    - **username**: Username
    """
    return service.update_user(username, user_data)


@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user")
def delete_user(
    username: str,
    service: UserService = Depends(get_user_service)
):
    """
    Delete a user
    
    - **username**: Username
    """
    service.delete_user(username)
    return None

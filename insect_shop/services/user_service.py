"""
User Service - Business Logic Layer

Every user leaving this layer goes through a response schema, which has no
password field.
"""
from sqlalchemy.orm import Session

from insect_shop.repositories.user_repository import UserRepository
from insect_shop.schemas.user import (
    UserRegister,
    UserLogin,
    UserUpdate,
    AuthenticatedUser,
    UserResponse,
    UserDetailResponse,
    UserListResponse
)


class UserService:
    """Service layer for users and authentication"""
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def authenticate(self, credentials: UserLogin) -> AuthenticatedUser:
        """Check credentials and return the safe user projection"""
        user = self.repository.authenticate(credentials.username, credentials.password)
        return AuthenticatedUser.model_validate(user)
    
    def register(self, user_data: UserRegister) -> UserResponse:
        """Register a new user"""
        user = self.repository.register(user_data.model_dump(by_alias=True))
        return UserResponse.model_validate(user)
    
    def get_all_users(self) -> UserListResponse:
        """Get all users ordered by username"""
        users = self.repository.find_all()
        return UserListResponse(
            users=[UserResponse.model_validate(u) for u in users],
            total=len(users)
        )
    
    def get_user(self, username: str) -> UserDetailResponse:
        """Get user with their orders"""
        return UserDetailResponse.model_validate(self.repository.get(username))
    
    def update_user(self, username: str, user_data: UserUpdate) -> UserResponse:
        """Update username, password and/or admin flag"""
        user = self.repository.update(
            username,
            user_data.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
        )
        return UserResponse.model_validate(user)
    
    def delete_user(self, username: str) -> None:
        """Delete user"""
        self.repository.remove(username)

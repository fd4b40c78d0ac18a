"""
Pydantic schemas for user request/response validation

No response schema carries the password hash.
"""
from pydantic import AliasChoices, BaseModel, Field, EmailStr, ConfigDict, AfterValidator
from typing import Annotated, Optional

from insect_shop.schemas.order import OrderResponse
from insect_shop.security import MAX_PASSWORD_BYTES


def is_admin_field(default, **kwargs):
    """is_admin is exposed as isAdmin on the wire"""
    return Field(
        default,
        validation_alias=AliasChoices("isAdmin", "is_admin"),
        serialization_alias="isAdmin",
        **kwargs
    )


def check_password_bytes(password):
    """bcrypt limits passwords by encoded length, not characters"""
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return password


Password = Annotated[str, Field(min_length=5, max_length=72), AfterValidator(check_password_bytes)]


class UserRegister(BaseModel):
    """Schema for registering a user"""
    username: str = Field(..., min_length=1, max_length=25)
    password: Password
    email: EmailStr
    is_admin: bool = is_admin_field(False)


class UserLogin(BaseModel):
    """Schema for authenticating a user"""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1, max_length=72)


class UserUpdate(BaseModel):
    """Schema for updating a user (all fields optional)"""
    username: Optional[str] = Field(None, min_length=1, max_length=25)
    password: Optional[Password] = None
    is_admin: Optional[bool] = is_admin_field(None)
    
    model_config = ConfigDict(extra="forbid")


class AuthenticatedUser(BaseModel):
    """Safe projection returned by a successful login"""
    username: str
    email: str
    is_admin: bool = is_admin_field(...)
    
    model_config = ConfigDict(from_attributes=True)


class UserResponse(AuthenticatedUser):
    """Schema for user response"""
    id: int
    orders: list[int]


class UserDetailResponse(UserResponse):
    """User with the orders placed under their id"""
    orders: list[OrderResponse]


class UserListResponse(BaseModel):
    """Schema for list of users response"""
    users: list[UserResponse]
    total: int

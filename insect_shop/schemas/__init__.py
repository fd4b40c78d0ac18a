"""
Schemas package
"""
from insect_shop.schemas.insect import (
    InsectBase,
    InsectCreate,
    InsectUpdate,
    InsectResponse,
    InsectListResponse
)
from insect_shop.schemas.order import (
    OrderBase,
    OrderCreate,
    OrderResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderTotalResponse
)
from insect_shop.schemas.user import (
    UserRegister,
    UserLogin,
    UserUpdate,
    AuthenticatedUser,
    UserResponse,
    UserDetailResponse,
    UserListResponse
)

__all__ = [
    "InsectBase",
    "InsectCreate",
    "InsectUpdate",
    "InsectResponse",
    "InsectListResponse",
    "OrderBase",
    "OrderCreate",
    "OrderResponse",
    "OrderDetailResponse",
    "OrderListResponse",
    "OrderTotalResponse",
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "AuthenticatedUser",
    "UserResponse",
    "UserDetailResponse",
    "UserListResponse"
]

"""
Services package
"""
from insect_shop.services.insect_service import InsectService
from insect_shop.services.order_service import OrderService
from insect_shop.services.user_service import UserService

__all__ = ["InsectService", "OrderService", "UserService"]

"""
Repositories package
"""
from insect_shop.repositories.insect_repository import InsectRepository
from insect_shop.repositories.order_repository import OrderRepository
from insect_shop.repositories.user_repository import UserRepository

__all__ = ["InsectRepository", "OrderRepository", "UserRepository"]

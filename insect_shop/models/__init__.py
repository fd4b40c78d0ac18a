"""
Models package
"""
from insect_shop.models.insect import Insect
from insect_shop.models.order import Order
from insect_shop.models.user import User

__all__ = ["Insect", "Order", "User"]

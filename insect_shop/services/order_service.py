"""
Order Service - Business Logic Layer
"""
from typing import Optional
from sqlalchemy.orm import Session

from insect_shop.repositories.order_repository import OrderRepository
from insect_shop.schemas.order import (
    OrderCreate,
    OrderResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderTotalResponse
)


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
    
    def search_orders(
        self,
        min_total: Optional[float] = None,
        max_total: Optional[float] = None,
        user_order_id: Optional[int] = None
    ) -> OrderListResponse:
        """Search orders by total range and ordering user"""
        orders = self.repository.find_all(
            min_total=min_total,
            max_total=max_total,
            user_order_id=user_order_id
        )
        return OrderListResponse(
            orders=[OrderResponse.model_validate(o) for o in orders],
            total=len(orders)
        )
    
    def get_order(self, order_id: int) -> OrderDetailResponse:
        """Get order by ID with item detail"""
        return OrderDetailResponse.model_validate(self.repository.get(order_id))
    
    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """Place a new order"""
        order = self.repository.create(order_data.model_dump())
        return OrderResponse.model_validate(order)
    
    def delete_order(self, order_id: int) -> None:
        """Delete order"""
        self.repository.remove(order_id)
    
    def get_total(self, order_id: int) -> OrderTotalResponse:
        """Compute the taxed total of an order without storing it"""
        return OrderTotalResponse(order_id=order_id, total=self.repository.get_total(order_id))
    
    def apply_total(self, order_id: int) -> OrderResponse:
        """Compute the taxed total and store it on the order"""
        total = self.repository.get_total(order_id)
        order = self.repository.set_total(order_id, total)
        return OrderResponse.model_validate(order)

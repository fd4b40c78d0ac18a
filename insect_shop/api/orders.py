"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import Optional

from insect_shop.database import get_db
from insect_shop.services.order_service import OrderService
from insect_shop.schemas.order import (
    OrderCreate,
    OrderResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderTotalResponse
)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Place a new order
    
    - **phone**: Contact phone (required)
    - **delivery_address**: Delivery address (required)
    - **items**: Insect IDs (required, at least one)
    - **submit_time**: Submission time (optional, defaults to now)
    - **total**: Order total (optional)
    - **user_order_id**: Ordering user ID (optional)
    """
    return service.create_order(order_data)


@router.get("", response_model=OrderListResponse, summary="Search orders")
def get_orders(
    min_total: Optional[float] = Query(None, alias="minTotal", ge=0, description="Minimum total"),
    max_total: Optional[float] = Query(None, alias="maxTotal", ge=0, description="Maximum total"),
    user_order_id: Optional[int] = Query(None, gt=0, description="Ordering user ID"),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve orders ordered by submit time
    
    - **minTotal**: Only orders totalling at least this much
    - **maxTotal**: Only orders totalling at most this much
    - **user_order_id**: Only orders placed by this user
    """
    return service.search_orders(
        min_total=min_total,
        max_total=max_total,
        user_order_id=user_order_id
    )


@router.get("/{order_id}", response_model=OrderDetailResponse, summary="Get order by ID")
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order with the insects it contains
    
    - **order_id**: Order ID
    """
    return service.get_order(order_id)


@router.get("/{order_id}/total", response_model=OrderTotalResponse, summary="Compute order total")
def get_order_total(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Compute the order total including 10% sales tax, rounded to a whole unit
    
    - **order_id**: Order ID
    """
    return service.get_total(order_id)


@router.post("/{order_id}/total", response_model=OrderResponse, summary="Store order total")
def apply_order_total(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Compute the order total and save it on the order
    
    - **order_id**: Order ID
    """
    return service.apply_total(order_id)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete order")
def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Delete an order
    
    - **order_id**: Order ID
    """
    service.delete_order(order_id)
    return None

"""
Order Repository - Data Access Layer
"""
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from insect_shop.config import settings
from insect_shop.database import row_to_dict
from insect_shop.exceptions import DuplicateEntity, InvalidArgument, NotFound
from insect_shop.models.insect import Insect
from insect_shop.models.order import Order
from insect_shop.models.user import User

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now()


class OrderRepository:
    """Repository for Order CRUD operations"""
    
    def __init__(self, db: Session, tax_rate: Optional[float] = None):
        self.db = db
        self.tax_rate = settings.SALES_TAX_RATE if tax_rate is None else tax_rate
    
    def create(self, order_data: dict) -> Order:
        """
        Create new order
        
        Args:
            order_data: Dictionary with phone, delivery_address, items and
                optionally submit_time, total, user_order_id
        
        Returns:
            Created order
        
        Raises:
            DuplicateEntity: If the user already has an order at submit_time
        """
        order_data = dict(order_data)
        if order_data.get("submit_time") is None:
            # Concrete value so a collision can be told apart from bad data
            order_data["submit_time"] = _now()
        
        order = Order(**order_data)
        self.db.add(order)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            user_order_id = order_data.get("user_order_id")
            submit_time = order_data.get("submit_time")
            if self._exists(user_order_id, submit_time):
                raise DuplicateEntity(f"Duplicate order: {user_order_id}@{submit_time}") from e
            raise InvalidArgument(f"Invalid order data: {e.orig}") from e
        
        # Keep the owner's order list in step
        if order.user_order_id is not None:
            user = self.db.get(User, order.user_order_id)
            if user:
                user.orders = list(user.orders or []) + [order.id]
        
        self.db.commit()
        self.db.refresh(order)
        logger.info("Created order %s for user %s", order.id, order.user_order_id)
        return order
    
    def find_all(
        self,
        min_total: Optional[float] = None,
        max_total: Optional[float] = None,
        user_order_id: Optional[int] = None
    ) -> List[Order]:
        """
        Find orders matching all provided filters, ordered by submit time
        
        Raises:
            InvalidArgument: If min_total is greater than max_total
        """
        if min_total is not None and max_total is not None and min_total > max_total:
            raise InvalidArgument("Min total cannot be greater than max")
        
        query = self.db.query(Order)
        if min_total is not None:
            query = query.filter(Order.total >= min_total)
        if max_total is not None:
            query = query.filter(Order.total <= max_total)
        if user_order_id is not None:
            query = query.filter(Order.user_order_id == user_order_id)
        
        return query.order_by(Order.submit_time, Order.id).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get(self, order_id: int) -> dict:
        """
        Get order by ID with item detail
        
        Returns:
            Order record whose items are the insect rows
            {id, species, price, image_url} ordered by species, one per
            stored id; ids of deleted insects are skipped
        
        Raises:
            NotFound: If order not found
        """
        order = self.get_by_id(order_id)
        if not order:
            raise NotFound(f"No order: {order_id}")
        
        item_ids = list(order.items or [])
        insects = {}
        if item_ids:
            insects = {
                insect.id: insect
                for insect in self.db.query(Insect).filter(Insect.id.in_(sorted(set(item_ids))))
            }
        
        # One entry per stored id, as priced by get_total
        items = [insects[item_id] for item_id in item_ids if item_id in insects]
        items.sort(key=lambda insect: insect.species)
        
        record = row_to_dict(order)
        record["items"] = [row_to_dict(insect) for insect in items]
        return record
    
    def remove(self, order_id: int) -> None:
        """
        Delete order
        
        Raises:
            NotFound: If order not found
        """
        order = self.get_by_id(order_id)
        if not order:
            raise NotFound(f"No order: {order_id}")
        
        if order.user_order_id is not None:
            user = self.db.get(User, order.user_order_id)
            if user and order.id in (user.orders or []):
                user.orders = [oid for oid in user.orders if oid != order.id]
        
        self.db.delete(order)
        self.db.commit()
        logger.info("Deleted order %s", order_id)
    
    def get_total(self, order_id: int) -> int:
        """
        Calculate the total cost of an order after sales tax
        
        Each item's price is taxed, the taxed amounts are summed and the sum
        is rounded half-up to a whole currency unit. An insect listed twice
        is charged twice; ids of deleted insects contribute nothing.
        
        Raises:
            NotFound: If order not found
        """
        order = self.get_by_id(order_id)
        if not order:
            raise NotFound(f"No order: {order_id}")
        
        item_ids = list(order.items or [])
        prices = {}
        if item_ids:
            prices = dict(
                self.db.query(Insect.id, Insect.price).filter(Insect.id.in_(sorted(set(item_ids)))).all()
            )
        
        multiplier = Decimal(1) + Decimal(str(self.tax_rate))
        total = Decimal(0)
        for item_id in item_ids:
            if item_id not in prices:
                continue
            total += Decimal(str(prices[item_id])) * multiplier
        
        return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    
    def set_total(self, order_id: int, total: float) -> Order:
        """
        Store a total on an order
        
        Raises:
            NotFound: If order not found
        """
        order = self.get_by_id(order_id)
        if not order:
            raise NotFound(f"No order: {order_id}")
        
        order.total = total
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def count(self) -> int:
        """Get total count of orders"""
        return self.db.query(Order).count()
    
    def _exists(self, user_order_id: Optional[int], submit_time) -> bool:
        if submit_time is None:
            return False
        return self.db.query(Order.id).filter(
            Order.user_order_id == user_order_id,
            Order.submit_time == submit_time
        ).first() is not None

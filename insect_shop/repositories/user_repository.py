"""
User Repository - Data Access Layer
"""
import logging
from functools import lru_cache
from typing import List, Optional
from sqlalchemy import text
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from insect_shop.config import settings
from insect_shop.database import row_to_dict
from insect_shop.exceptions import DuplicateEntity, InvalidArgument, NotFound, Unauthorized
from insect_shop.helpers.sql import sql_for_partial_update
from insect_shop.models.order import Order
from insect_shop.models.user import User
from insect_shop.security import hash_password, verify_password

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _dummy_hash(work_factor: int) -> str:
    """Hash checked against when the username is unknown"""
    return hash_password("not-a-real-password", work_factor)


class UserRepository:
    """Repository for User CRUD operations and authentication"""
    
    # Updatable field -> column. WARNING: this can set a new password or make
    # a user an admin; callers must have authorized the change.
    COLUMN_NAMES = {
        "username": "username",
        "password": "password_hash",
        "isAdmin": "is_admin",
    }
    
    def __init__(self, db: Session, work_factor: Optional[int] = None):
        self.db = db
        self.work_factor = work_factor or settings.BCRYPT_WORK_FACTOR
    
    def authenticate(self, username: str, password: str) -> dict:
        """
        Authenticate user with username and password
        
        Returns:
            {username, email, isAdmin}
        
        Raises:
            Unauthorized: If user not found or wrong password
        """
        user = self.get_by_username(username)
        stored_hash = user.password_hash if user else _dummy_hash(self.work_factor)
        
        if not verify_password(password, stored_hash) or not user:
            logger.info("Failed login for %s", username)
            raise Unauthorized("Invalid username/password")
        
        return {"username": user.username, "email": user.email, "isAdmin": user.is_admin}
    
    def register(self, user_data: dict) -> User:
        """
        Register a new user
        
        Args:
            user_data: Dictionary with username, password, email, isAdmin
        
        Raises:
            DuplicateEntity: If username is taken
        """
        username = user_data["username"]
        user = User(
            username=username,
            password_hash=hash_password(user_data["password"], self.work_factor),
            email=user_data["email"],
            is_admin=bool(user_data.get("isAdmin", False)),
            orders=[]
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.get_by_username(username):
                raise DuplicateEntity(f"Duplicate username: {username}") from e
            raise InvalidArgument(f"Invalid user data: {e.orig}") from e
        
        self.db.refresh(user)
        logger.info("Registered user %s", username)
        return user
    
    def find_all(self) -> List[User]:
        """Get all users ordered by username"""
        return self.db.query(User).order_by(User.username).all()
    
    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        return self.db.query(User).filter(User.username == username).first()
    
    def get(self, username: str) -> dict:
        """
        Get user by username with their orders
        
        Raises:
            NotFound: If user not found
        """
        user = self.get_by_username(username)
        if not user:
            raise NotFound(f"No user: {username}")
        
        orders = self.db.query(Order).filter(
            Order.user_order_id == user.id
        ).order_by(Order.submit_time, Order.id).all()
        
        record = row_to_dict(user)
        record["orders"] = [row_to_dict(order) for order in orders]
        return record
    
    def update(self, username: str, data: dict) -> User:
        """
        Partially update a user
        
        Data can include username, password and isAdmin; a new password is
        hashed before it is stored.
        
        Raises:
            InvalidArgument: If data holds no updatable field
            NotFound: If user not found
            DuplicateEntity: If renamed onto an existing username
        """
        data = dict(data)
        if data.get("password"):
            data["password"] = hash_password(data["password"], self.work_factor)
        
        update = sql_for_partial_update(data, self.COLUMN_NAMES)
        statement = text(
            f"UPDATE users SET {update.set_clause} WHERE username = {update.next_placeholder}"
        )
        
        try:
            result = self.db.execute(statement, update.params(username))
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntity(f"Duplicate username: {data.get('username')}") from e
        
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFound(f"No user: {username}")
        
        self.db.commit()
        return self.get_by_username(data.get("username") or username)
    
    def remove(self, username: str) -> None:
        """
        Delete user
        
        Raises:
            NotFound: If user not found
        """
        user = self.get_by_username(username)
        if not user:
            raise NotFound(f"No user: {username}")
        
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user %s", username)
    
    def count(self) -> int:
        """Get total count of users"""
        return self.db.query(User).count()

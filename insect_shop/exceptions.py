"""
Service exception hierarchy

Repositories raise these; the API layer maps them to HTTP responses.
"""
from typing import Any, Dict


class ShopError(Exception):
    """Base exception for Insect Shop errors"""
    
    status_code = 500
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for API responses"""
        return {"error": {"message": self.message, "status": self.status_code}}


class InvalidArgument(ShopError):
    """Malformed filter range or empty update payload"""
    status_code = 400


class NotFound(ShopError):
    """Operation targets a nonexistent id or username"""
    status_code = 404


class DuplicateEntity(ShopError):
    """Uniqueness violation"""
    status_code = 400


class Unauthorized(ShopError):
    """Failed authentication"""
    status_code = 401

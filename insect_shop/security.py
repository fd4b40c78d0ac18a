"""
Password hashing helpers (bcrypt)
"""
import bcrypt

from insect_shop.config import settings
from insect_shop.exceptions import InvalidArgument

# bcrypt only accepts passwords up to this many bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, work_factor: int = None) -> str:
    """
    Hash a password with a fresh salt
    
    Raises:
        InvalidArgument: If the UTF-8 encoded password is longer than 72 bytes
    """
    encoded = password.encode()
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise InvalidArgument(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    
    rounds = work_factor or settings.BCRYPT_WORK_FACTOR
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of a password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Stored value is not a bcrypt hash, or the password is too long
        return False

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import uuid

import bcrypt
from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel, ValidationError

from sanor.config import get_settings

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """Identity carried inside a session token.

    The role is trusted as issued: it is not re-read from the users table, so a
    role change only takes effect once the holder's token expires.
    """

    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


# ===== Password hashing =====
def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Unreadable password hash encountered during login")
        return False


# ===== JWT helpers =====
def create_access_token(user, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": user.email,
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "exp": expire,
        "iat": now,
        "nbf": now,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenUser:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    try:
        return TokenUser(id=payload.get("id"), email=payload.get("email"), role=payload.get("role"))
    except ValidationError:
        raise HTTPException(status_code=401, detail="Invalid token payload")


def get_current_user(token: HTTPAuthorizationCredentials = Depends(http_bearer)) -> TokenUser:
    if not token or not token.credentials:
        raise HTTPException(status_code=401, detail="Access token required")
    return decode_access_token(token.credentials)


def require_admin(current_user: TokenUser = Depends(get_current_user)) -> TokenUser:
    if not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user

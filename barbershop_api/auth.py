# barbershop_api/auth.py

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlmodel import Session

from barbershop_api import config
from barbershop_api.db import get_session
from barbershop_api.errors import AuthenticationError
from barbershop_api.models import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# errors are raised below so they go through the envelope handler
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def create_access_token(data: dict, expires_minutes: int = config.ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    session: Session = Depends(get_session),
) -> dict:
    if not token:
        raise AuthenticationError("Unauthorized", details={"token": "Token not provided"})

    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
        principal_id = uuid.UUID(str(payload.get("sub")))
    except (JWTError, ValueError):
        raise AuthenticationError("Invalid token")

    user = session.get(User, principal_id)
    if user is None:
        raise AuthenticationError("User not found")

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
    }

# barbershop_api/routers/auth_routes.py

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from barbershop_api.auth import create_access_token, hash_password, verify_password
from barbershop_api.db import get_session
from barbershop_api.errors import AuthenticationError, ConflictError
from barbershop_api.models import User
from barbershop_api.responses import Operation, message, success
from barbershop_api.schemas import LoginCreate, SignupCreate, Token, UserPublic
from barbershop_api.validation import validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


def email_taken() -> ConflictError:
    return ConflictError("Email already exists", details={"email": "Email already in use"})


@router.post("/signup", status_code=201)
def signup(
    payload: Any = Body(None),
    session: Session = Depends(get_session),
):
    data = validate_payload(SignupCreate, payload)

    # 1) Check if email already exists
    existing = session.exec(select(User).where(User.email == data["email"])).first()
    if existing is not None:
        raise email_taken()

    # 2) Create user in DB
    user = User(name=data["name"], email=data["email"], password_hash=hash_password(data["password"]))
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise email_taken()
    session.refresh(user)  # fills user.created_at

    logger.info("User %s signed up", user.id)
    return success(Operation.CREATE, user.email, user.id, UserPublic.model_validate(user))


@router.post("/login")
def login(
    payload: Any = Body(None),
    session: Session = Depends(get_session),
):
    data = validate_payload(LoginCreate, payload)

    user = session.exec(select(User).where(User.email == data["email"])).first()
    if user is None or not verify_password(data["password"], user.password_hash):
        raise AuthenticationError("Invalid credentials")

    token = create_access_token({"sub": str(user.id)})
    return message("Login successful", Token(access_token=token))

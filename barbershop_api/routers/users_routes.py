# barbershop_api/routers/users_routes.py

from fastapi import APIRouter, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.responses import message

router = APIRouter(
    tags=["users"],
)


@router.get("/me")
def me(current_user: dict = Depends(get_current_user)):
    return message("User authenticated", {"user": current_user})

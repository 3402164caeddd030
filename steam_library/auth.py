"""Placeholder login/logout routes; no session state is kept."""

from fastapi import APIRouter

from .models import MessageResponse

auth_router = APIRouter(tags=["auth"])


@auth_router.api_route("/login", methods=["GET", "POST"], response_model=MessageResponse)
async def login() -> MessageResponse:
    return MessageResponse(message="User login")


@auth_router.api_route("/logout", methods=["GET", "POST"], response_model=MessageResponse)
async def logout() -> MessageResponse:
    return MessageResponse(message="User logout")

from fastapi import APIRouter

from app.api.endpoints import (
    users,
    health
)

api_router = APIRouter()

api_router.include_router(users.router, tags=["users"])
api_router.include_router(health.router, tags=["health"])

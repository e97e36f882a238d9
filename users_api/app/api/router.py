"""
Top‑level API router.

This router aggregates domain‑specific routers under a unified prefix.
The application factory mounts it under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])

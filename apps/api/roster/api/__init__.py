from __future__ import annotations

from fastapi import APIRouter

from roster.api import routes_auth, routes_classes

router = APIRouter()
router.include_router(routes_auth.router)
router.include_router(routes_classes.router)

"""Proxy API router."""

from fastapi import APIRouter

from . import auth, catalog, cycles, dashboard, health, patients

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(patients.router, prefix="/patients", tags=["patients"])
router.include_router(cycles.router, tags=["cycles"])
router.include_router(catalog.router)
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

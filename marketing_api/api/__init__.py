"""API routes."""

from fastapi import APIRouter

from marketing_api.api import auth, campaigns, company, stats, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(campaigns.router, prefix="/campaigns", tags=["campaigns"])
router.include_router(stats.router, prefix="/stats", tags=["stats"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(company.router, prefix="/company", tags=["company"])

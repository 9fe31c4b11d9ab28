"""
API Routes package.
"""
from fastapi import APIRouter

from hirehub.api.routes.admin import router as admin_router
from hirehub.api.routes.applications import router as applications_router
from hirehub.api.routes.auth import router as auth_router
from hirehub.api.routes.employers import router as employers_router
from hirehub.api.routes.health import router as health_router
from hirehub.api.routes.job_seekers import router as job_seekers_router
from hirehub.api.routes.jobs import router as jobs_router
from hirehub.api.routes.notifications import router as notifications_router
from hirehub.api.routes.resumes import router as resumes_router
from hirehub.api.routes.users import router as users_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(employers_router)
api_router.include_router(job_seekers_router)
api_router.include_router(jobs_router)
api_router.include_router(resumes_router)
api_router.include_router(applications_router)
api_router.include_router(notifications_router)
api_router.include_router(admin_router)

__all__ = [
    "api_router",
    "admin_router",
    "applications_router",
    "auth_router",
    "employers_router",
    "health_router",
    "job_seekers_router",
    "jobs_router",
    "notifications_router",
    "resumes_router",
    "users_router",
]

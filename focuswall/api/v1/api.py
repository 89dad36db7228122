from fastapi import APIRouter

from focuswall.api.v1.routes import goals, tasks, settings, dashboard

api_router = APIRouter()

api_router.include_router(goals.router)
api_router.include_router(tasks.router)
api_router.include_router(settings.router)
api_router.include_router(dashboard.router)

from fastapi import APIRouter

from trackstar.routes.info_routes import router as info_router
from trackstar.routes.user_routes import router as user_router
from trackstar.routes.task_routes import router as task_router
from trackstar.routes.habit_routes import router as habit_router
from trackstar.routes.habit_log_routes import router as habit_log_router

# API Routes, mounted under /api by create_app()
api_router = APIRouter()
api_router.include_router(info_router)
api_router.include_router(task_router)
api_router.include_router(habit_router)
api_router.include_router(user_router)
api_router.include_router(habit_log_router)

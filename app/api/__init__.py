from fastapi import APIRouter
from .apps import router as apps_router
from .network import router as network_router
from .recommendations import router as recommendations_router
from .submissions import router as submissions_router

api_router = APIRouter()
api_router.include_router(apps_router)
api_router.include_router(network_router)
api_router.include_router(recommendations_router)
api_router.include_router(submissions_router)

__all__ = ["api_router"]

from fastapi import APIRouter

from clacks.demo.routes.v1.info import router as info_router
from clacks.demo.settings import get_settings

v1_router = APIRouter(prefix=get_settings().api_v1_prefix)

v1_router.include_router(info_router)

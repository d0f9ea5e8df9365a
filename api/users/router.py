"""
    레거시 사용자 관련 라우터
"""

from fastapi import APIRouter
from users.endpoints.delete import delete_router
from users.endpoints.read import read_router

# 사용자 라우터 (prefix와 tags 설정)
users_router = APIRouter(
    prefix="/users",
    tags=["Users"]
)

# 엔드포인트 라우터 포함
users_router.include_router(read_router)
users_router.include_router(delete_router)

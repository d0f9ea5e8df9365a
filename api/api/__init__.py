"""
    API 라우터 패키지

    이 패키지는 공통 FastAPI 라우터들을 관리합니다.
"""

from .health import health_router

__all__ = [
    "health_router",
]

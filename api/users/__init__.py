"""
    레거시 사용자 관리 패키지
"""

from .router import users_router

__all__ = ["users_router"]

"""
    레거시 사용자 관리 API 메인 애플리케이션

    FastAPI 애플리케이션의 진입점입니다.
    모든 라우터를 등록하고 기본 설정을 관리합니다.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging import setup_logging
from api.health import health_router
from users import users_router

# 로깅 설정
setup_logging()

app = FastAPI(
    title="Legacy User Admin API",
    description="레거시 사용자 관리 및 연쇄 삭제 API",
    version="1.0.0"
)

# CORS 설정 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True, # 쿠키 전달 허용
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# 라우터 등록
app.include_router(health_router)
app.include_router(users_router)

@app.get("/")
def root():
    """API 루트 엔드포인트"""
    return {
        "message": "Legacy User Admin API Server",
        "version": "1.0.0",
        "description": "레거시 사용자 관리 및 연쇄 삭제 API",
        "endpoints": {
            "health": "/health",
            "users": "/users",
            "docs": "/docs",
            "redoc": "/redoc"
        }
    }

"""
    헬스체크 및 시스템 상태 확인 API
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.session import get_db
from db.models import TbUtilizadores

health_router = APIRouter(
    prefix="/health",
    tags=["Health Check"]
)

@health_router.get("/")
def health_check():
    """기본 헬스체크"""
    return {
        "status": "healthy", 
        "message": "Legacy user admin API server is running properly"
    }

@health_router.get("/db")
def test_database_connection(db: Session = Depends(get_db)):
    """데이터베이스 연결 테스트"""
    try:
        db.execute(text("SELECT 1"))
        # 루트 사용자 테이블 레코드 수 조회
        user_count = db.query(TbUtilizadores).count()
        return {
            "status": "success",
            "message": "Database connection successful",
            "user_count": user_count
        }
    except SQLAlchemyError as e:
        logger.error(f"데이터베이스 연결 실패: {e}")
        return {
            "status": "error", 
            "message": f"Database connection failed: {str(e)}"
        }

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# 메타데이터
metadata = MetaData()

# Base 클래스 생성 (레거시 스키마 tb_* 테이블 매핑용)
Base = declarative_base(metadata=metadata)

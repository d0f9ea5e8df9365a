"""
    공통 설정 패키지
"""

from .logging import setup_logging

__all__ = ["setup_logging"]

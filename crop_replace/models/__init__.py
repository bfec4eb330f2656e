"""SQLAlchemy 테이블 정의 패키지 초기화 모듈입니다."""

from crop_replace.models.post import build_posts_table

__all__ = ["build_posts_table"]

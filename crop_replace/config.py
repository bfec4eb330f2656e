"""환경 변수 기반 크롭 치환 도구 설정을 중앙에서 관리합니다."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./wordpress.db"
    DB_TABLE_PREFIX: str = "wp_"
    POST_TYPE: str = "post"

    # 모든 attachment guid가 공유하는 사이트 주소 (끝에 / 포함)
    GUID_PREFIX: str = ""

    # Object storage
    STORAGE_BACKEND: str = "gcs"
    BUCKET: str = ""
    BUCKET_PREFIX: str = ""
    NO_BUCKET_PREFIX: bool = False
    STORAGE_BASE_URL: str = "https://storage.googleapis.com"
    STORAGE_TIMEOUT_SECONDS: float = 10.0
    UPLOAD_DIR: str = "uploads"

    WIDTH_DIFF_TOLERANCE: float = 35.0
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = str(Path.cwd() / ".env")


settings = Settings()

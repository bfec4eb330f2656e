"""크롭 치환 실행 설정과 결과 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, model_validator

STORAGE_BACKENDS = ("gcs", "local")
POST_TYPES = ("post", "page")


class ReplaceConfig(BaseModel):
    table_prefix: str
    post_type: str = "post"
    guid_prefix: str
    bucket: str = ""
    bucket_prefix: str = ""
    no_bucket_prefix: bool = False
    storage_backend: str = "gcs"
    upload_dir: str = "uploads"
    storage_base_url: str = "https://storage.googleapis.com"
    storage_timeout: float = 10.0
    width_diff_tolerance: float = 35.0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_consistency(self) -> "ReplaceConfig":
        if not self.table_prefix:
            raise ValueError("table prefix must be set")
        if not self.guid_prefix:
            raise ValueError("guid prefix must be set")
        if not self.guid_prefix.endswith("/"):
            raise ValueError(
                f"guid prefix {self.guid_prefix!r} does not have a trailing slash, "
                "which indicates that it might not be what it should be"
            )
        if self.bucket_prefix.endswith("/"):
            raise ValueError(f"bucket prefix {self.bucket_prefix!r} has a trailing slash but it must not")
        if not self.bucket_prefix and not self.no_bucket_prefix:
            raise ValueError("bucket prefix must be set unless no_bucket_prefix is true")
        if self.post_type not in POST_TYPES:
            raise ValueError("post type must be either post or page")
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(f"storage backend must be one of {', '.join(STORAGE_BACKENDS)}")
        if self.storage_backend == "gcs" and not self.bucket:
            raise ValueError("bucket must be set for the gcs storage backend")
        if self.width_diff_tolerance < 0:
            raise ValueError("width difference tolerance must not be negative")
        return self

    @property
    def table_name(self) -> str:
        return f"{self.table_prefix}posts"

    @property
    def guid_prefix_trimmed(self) -> str:
        return self.guid_prefix[:-1]


class ContentChange(BaseModel):
    post_id: int
    original: str
    content: str


class ReplaceResult(BaseModel):
    dry_run: bool
    attachment_count: int
    scanned_count: int
    changed_count: int
    changed_ids: list[int]

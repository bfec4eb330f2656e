"""서비스 레이어 패키지 초기화 모듈입니다."""

from crop_replace.services import (
    crop_grammar,
    crop_matcher,
    crop_replace_service,
    inventory_service,
    storage_client,
)

"""크롭 치환 작업 전반에서 사용하는 예외 정의입니다."""

from __future__ import annotations


class CropReplaceError(Exception):
    """Base exception for a crop replacement run."""


class InventoryError(CropReplaceError):
    pass


class StorageListingError(CropReplaceError):
    pass


class PersistenceError(CropReplaceError):
    pass

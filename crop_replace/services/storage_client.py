"""오브젝트 스토리지(GCS 공개 버킷, 로컬 업로드 디렉터리) 목록 조회 클라이언트입니다."""

from __future__ import annotations

import logging
import os
from typing import Iterator, Protocol
from urllib.parse import quote

import httpx

from crop_replace.errors import StorageListingError
from crop_replace.schemas.replace import ReplaceConfig

logger = logging.getLogger(__name__)


class ObjectLister(Protocol):
    def list_names(self, prefix: str) -> Iterator[str]:
        ...


class GCSObjectLister:
    """Lists objects of a public bucket through the JSON API without authentication."""

    def __init__(
        self,
        bucket: str,
        base_url: str = "https://storage.googleapis.com",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self.bucket = bucket
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def _objects_url(self) -> str:
        return f"{self.base_url}/storage/v1/b/{quote(self.bucket, safe='')}/o"

    def list_names(self, prefix: str) -> Iterator[str]:
        page_token: str | None = None
        while True:
            params = {"prefix": prefix, "fields": "items(name),nextPageToken"}
            if page_token:
                params["pageToken"] = page_token
            try:
                response = self._client.get(self._objects_url(), params=params)
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise StorageListingError(
                    f"could not list objects with prefix {prefix!r} in bucket {self.bucket!r}: {exc}"
                ) from exc

            for item in payload.get("items") or []:
                name = item.get("name")
                if name:
                    yield name

            page_token = payload.get("nextPageToken")
            if not page_token:
                return

    def close(self) -> None:
        self._client.close()


class LocalObjectLister:
    """Lists files of a local uploads mirror as '/'-separated object names."""

    def __init__(self, root: str):
        self.root = root

    def list_names(self, prefix: str) -> Iterator[str]:
        directory = os.path.join(self.root, os.path.dirname(prefix))
        if not os.path.isdir(directory):
            return
        names: list[str] = []
        for dirpath, _, filenames in os.walk(directory):
            for filename in filenames:
                abs_path = os.path.join(dirpath, filename)
                name = os.path.relpath(abs_path, self.root).replace("\\", "/")
                if name.startswith(prefix):
                    names.append(name)
        yield from sorted(names)

    def close(self) -> None:
        pass


def get_object_lister(config: ReplaceConfig) -> GCSObjectLister | LocalObjectLister:
    if config.storage_backend == "local":
        logger.info("[storage] listing local directory %s", config.upload_dir)
        return LocalObjectLister(config.upload_dir)
    logger.info("[storage] listing bucket %s", config.bucket)
    return GCSObjectLister(config.bucket, base_url=config.storage_base_url, timeout=config.storage_timeout)

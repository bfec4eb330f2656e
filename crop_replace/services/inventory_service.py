"""Attachment 목록과 스토리지의 크롭 변형을 수집하는 서비스 레이어입니다."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from crop_replace.errors import InventoryError
from crop_replace.models.post import build_posts_table
from crop_replace.schemas.crop import Attachment, AttachmentRecord, Crop
from crop_replace.schemas.replace import ReplaceConfig
from crop_replace.services.crop_grammar import parse_crop_suffix
from crop_replace.services.storage_client import ObjectLister
from crop_replace.utils.filenames import file_extension

logger = logging.getLogger(__name__)


def load_attachment_records(conn: Connection, config: ReplaceConfig) -> list[AttachmentRecord]:
    posts = build_posts_table(config.table_prefix)
    rows = conn.execute(
        select(posts.c.ID, posts.c.guid)
        .where(posts.c.post_type == "attachment")
        .order_by(posts.c.ID)
    )

    records: list[AttachmentRecord] = []
    for row in rows:
        guid = row.guid or ""
        ext = file_extension(guid)
        if not ext:
            # 확장자가 없으면 이미지일 가능성이 낮다.
            logger.info("[inventory] skipping file without extension: %s", guid)
            continue

        if not guid.startswith(config.guid_prefix):
            raise InventoryError(
                f"the row with ID {row.ID} has the guid {guid!r} "
                f"but all attachments must have the prefix {config.guid_prefix!r}"
            )

        # guid prefix를 제거하되 선행 '/'는 남긴다.
        file_name = guid[len(config.guid_prefix_trimmed):]
        records.append(AttachmentRecord(id=int(row.ID), guid=guid, file_name=file_name, ext=ext))
    return records


def object_name_for(record: AttachmentRecord, config: ReplaceConfig) -> str:
    if not config.bucket_prefix:
        return record.file_name.lstrip("/")
    return config.bucket_prefix + record.file_name


def collect_crops(
    lister: ObjectLister,
    records: Iterable[AttachmentRecord],
    config: ReplaceConfig,
) -> list[Attachment]:
    """Attach to every record the crop variants found next to its object."""
    attachments: list[Attachment] = []
    for record in records:
        object_name = object_name_for(record, config)
        prefix = object_name[: len(object_name) - len(record.ext)]

        exists = False
        crops: list[Crop] = []
        for name in lister.list_names(prefix):
            if name == object_name:
                exists = True
                continue
            crop = parse_crop_suffix(name[len(prefix):], record.ext)
            if crop is not None:
                crops.append(crop)

        if not exists:
            logger.warning("[inventory] there is no file named %s", object_name)

        attachments.append(
            Attachment(id=record.id, file_name=record.file_name, ext=record.ext, crops=tuple(crops))
        )
    return attachments


def build_inventory(engine: Engine, lister: ObjectLister, config: ReplaceConfig) -> list[Attachment]:
    try:
        with engine.connect() as conn:
            records = load_attachment_records(conn, config)
    except SQLAlchemyError as exc:
        raise InventoryError(f"could not read attachments from {config.table_name}: {exc}") from exc
    if not records:
        return []
    logger.info("[inventory] retrieved %s attachment posts", len(records))

    attachments = collect_crops(lister, records, config)
    logger.info("[inventory] finished listing crop variants")
    return attachments

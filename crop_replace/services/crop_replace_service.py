"""Crop Replace 도메인 서비스 레이어입니다. 본문 치환 규칙과 트랜잭션 저장 흐름을 캡슐화합니다."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sqlalchemy import select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from crop_replace.errors import PersistenceError
from crop_replace.models.post import build_posts_table
from crop_replace.schemas.crop import Attachment
from crop_replace.schemas.replace import ContentChange, ReplaceConfig, ReplaceResult
from crop_replace.services.crop_grammar import parse_crop_suffix
from crop_replace.services.crop_matcher import WIDTH_DIFF_TOLERANCE, resolve_replacement
from crop_replace.utils.text_search import string_indexes

logger = logging.getLogger(__name__)


def replace_content_single(
    content: str,
    attachment: Attachment,
    tolerance: float = WIDTH_DIFF_TOLERANCE,
) -> str:
    stem = attachment.stem
    replacements: dict[str, str] = {}
    for index in string_indexes(content, stem):
        reference = parse_crop_suffix(content[index + len(stem):], attachment.ext)
        if reference is None:
            continue
        original = f"{stem}-{reference.dimensions}{attachment.ext}"
        if original in replacements:
            continue
        target = resolve_replacement(reference, attachment, tolerance)
        if target is not None:
            replacements[original] = target

    for original, target in replacements.items():
        content = content.replace(original, target)
    return content


def replace_crops(
    content: str,
    attachments: Sequence[Attachment],
    tolerance: float = WIDTH_DIFF_TOLERANCE,
) -> str:
    for attachment in attachments:
        content = replace_content_single(content, attachment, tolerance)
    return content


def rewrite_rows(
    rows: Iterable[tuple[int, str]],
    attachments: Sequence[Attachment],
    tolerance: float = WIDTH_DIFF_TOLERANCE,
) -> list[ContentChange]:
    changes: list[ContentChange] = []
    for post_id, content in rows:
        content = content or ""
        got = replace_crops(content, attachments, tolerance)
        if got != content:
            changes.append(ContentChange(post_id=post_id, original=content, content=got))
    return changes


def replace_image_crops(
    engine: Engine,
    config: ReplaceConfig,
    attachments: Sequence[Attachment],
    dry_run: bool = False,
) -> ReplaceResult:
    """Rewrite post_content of every post of config.post_type in one transaction.

    Any failed update rolls back every staged change.
    """
    posts = build_posts_table(config.table_prefix)
    query = (
        select(posts.c.ID, posts.c.post_content)
        .where(posts.c.post_type == config.post_type)
        .order_by(posts.c.ID)
    )

    try:
        with engine.begin() as conn:
            rows = [(int(row.ID), row.post_content) for row in conn.execute(query)]
            changes = rewrite_rows(rows, attachments, config.width_diff_tolerance)

            if not dry_run:
                for change in changes:
                    logger.info("[rewrite] updating %s", change.post_id)
                    result = conn.execute(
                        update(posts)
                        .where(posts.c.ID == change.post_id)
                        .values(post_content=change.content)
                    )
                    if result.rowcount != 1:
                        raise PersistenceError(
                            f"after update of row {change.post_id} results say {result.rowcount} rows affected"
                        )
    except SQLAlchemyError as exc:
        raise PersistenceError(f"could not replace crops in {config.table_name}: {exc}") from exc

    return ReplaceResult(
        dry_run=dry_run,
        attachment_count=len(attachments),
        scanned_count=len(rows),
        changed_count=len(changes),
        changed_ids=[change.post_id for change in changes],
    )

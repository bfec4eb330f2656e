"""본문에서 참조한 크롭을 실제 존재하는 크롭으로 대응시키는 정책입니다."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from crop_replace.schemas.crop import Attachment, Crop

logger = logging.getLogger(__name__)

# 치환 대상 크롭 간에 허용되는 최대 너비 차이(%)
WIDTH_DIFF_TOLERANCE = 35.0


def width_difference_percent(ref_width: int, candidate_width: int) -> float:
    if ref_width == 0:
        return math.inf
    return abs(ref_width - candidate_width) / ref_width * 100.0


def find_suitable_crop(
    reference: Crop,
    crops: Sequence[Crop],
    tolerance: float = WIDTH_DIFF_TOLERANCE,
) -> tuple[bool, int]:
    """Return (exact match found, index of the last crop within tolerance or -1).

    The scan stops at the first crop with the same width and height.
    Among the remaining candidates the last one within tolerance wins,
    not the closest one.
    """
    ok_diff = -1
    for i, existing in enumerate(crops):
        if reference.width == existing.width and reference.height == existing.height:
            return True, ok_diff
        if width_difference_percent(reference.width, existing.width) <= tolerance:
            ok_diff = i
    return False, ok_diff


def resolve_replacement(
    reference: Crop,
    attachment: Attachment,
    tolerance: float = WIDTH_DIFF_TOLERANCE,
) -> str | None:
    """Return the file name to use instead of the referenced crop, or None to keep it."""
    good, ok_diff = find_suitable_crop(reference, attachment.crops, tolerance)
    if good:
        return None
    if ok_diff > -1:
        chosen = attachment.crops[ok_diff]
        logger.info(
            "[rewrite] using width %s instead of %s for %s",
            chosen.width,
            reference.width,
            attachment.file_name,
        )
        return f"{attachment.stem}-{chosen.dimensions}{attachment.ext}"
    # 허용 범위의 크롭이 없으면 원본 파일을 사용
    return attachment.file_name

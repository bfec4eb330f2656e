"""Command-line entry point for replacing missing image crops in post content."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from crop_replace.config import settings
from crop_replace.database import make_engine
from crop_replace.errors import CropReplaceError
from crop_replace.schemas.replace import POST_TYPES, STORAGE_BACKENDS, ReplaceConfig, ReplaceResult
from crop_replace.services.crop_replace_service import replace_image_crops
from crop_replace.services.inventory_service import build_inventory
from crop_replace.services.storage_client import get_object_lister

logger = logging.getLogger("crop_replace.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Replace references to cropped attachment images that do not exist in storage "
            "with similar existing crops or with the original image."
        )
    )
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="SQLAlchemy database URL")
    parser.add_argument("--dbprefix", default=settings.DB_TABLE_PREFIX, help="the WP database table prefix")
    parser.add_argument(
        "--guidprefix",
        default=settings.GUID_PREFIX,
        help="the start of each 'guid' in the attachments, with a trailing slash",
    )
    parser.add_argument("--bucket", default=settings.BUCKET, help="the bucket name")
    parser.add_argument(
        "--bucketprefix",
        default=settings.BUCKET_PREFIX,
        help="the prefix that all objects in the bucket have, without a trailing slash",
    )
    parser.add_argument(
        "--nobucketprefix",
        action="store_true",
        default=settings.NO_BUCKET_PREFIX,
        help="no bucket prefix is expected",
    )
    parser.add_argument("--posttype", default=settings.POST_TYPE, choices=POST_TYPES, help="the post_type to transform")
    parser.add_argument(
        "--storage",
        default=settings.STORAGE_BACKEND,
        choices=STORAGE_BACKENDS,
        help="where crop variants are listed from (default: %(default)s)",
    )
    parser.add_argument(
        "--upload-dir",
        default=settings.UPLOAD_DIR,
        help="local directory mirroring the bucket, used with --storage local",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=settings.WIDTH_DIFF_TOLERANCE,
        help="maximum width difference in percent for using another crop (default: %(default)s)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the posts that would change without writing them.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ReplaceConfig:
    return ReplaceConfig(
        table_prefix=args.dbprefix,
        post_type=args.posttype,
        guid_prefix=args.guidprefix,
        bucket=args.bucket,
        bucket_prefix=args.bucketprefix,
        no_bucket_prefix=args.nobucketprefix,
        storage_backend=args.storage,
        upload_dir=args.upload_dir,
        storage_base_url=settings.STORAGE_BASE_URL,
        storage_timeout=settings.STORAGE_TIMEOUT_SECONDS,
        width_diff_tolerance=args.tolerance,
    )


def print_result(result: ReplaceResult) -> None:
    mode = "DRY-RUN" if result.dry_run else "EXECUTE"
    print(f"[{mode}] crop replacement result")
    print(f"  attachment_count: {result.attachment_count}")
    print(f"  scanned_count: {result.scanned_count}")
    print(f"  changed_count: {result.changed_count}")
    if result.changed_ids:
        print("  changed_ids:")
        for post_id in result.changed_ids:
            print(f"    - {post_id}")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    try:
        config = build_config(args)
    except ValidationError as exc:
        print("Invalid command line arguments:")
        for error in exc.errors():
            print(f"  {error['msg']}")
        return 1

    try:
        engine = make_engine(args.database_url)
    except SQLAlchemyError as exc:
        logger.error("ERROR connecting to database: %s", exc)
        return 1
    lister = get_object_lister(config)
    try:
        attachments = build_inventory(engine, lister, config)
        if not attachments:
            print("There aren't any attachments to sync up.")
            return 0
        result = replace_image_crops(engine, config, attachments, dry_run=args.dry_run)
    except CropReplaceError as exc:
        logger.error("ERROR replacing image crops: %s", exc)
        return 1
    finally:
        lister.close()
        engine.dispose()

    print_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

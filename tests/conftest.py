import pytest
from sqlalchemy import MetaData, insert

from crop_replace.database import make_engine
from crop_replace.models.post import build_posts_table
from crop_replace.schemas.crop import Attachment, Crop
from crop_replace.schemas.replace import ReplaceConfig

TABLE_PREFIX = "wp_"
GUID_PREFIX = "https://example.com/wp-content/uploads/"


def make_crop(width: int, height: int) -> Crop:
    return Crop(dimensions=f"{width}x{height}", width=width, height=height)


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'wordpress.db'}")
    metadata = MetaData()
    build_posts_table(TABLE_PREFIX, metadata)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def config():
    return ReplaceConfig(
        table_prefix=TABLE_PREFIX,
        post_type="post",
        guid_prefix=GUID_PREFIX,
        bucket="media-bucket",
        bucket_prefix="wp-content/uploads",
    )


@pytest.fixture
def add_post(engine):
    posts = build_posts_table(TABLE_PREFIX)

    def _add(post_type: str, content: str = "", guid: str = "") -> int:
        with engine.begin() as conn:
            result = conn.execute(
                insert(posts).values(post_type=post_type, post_content=content, guid=guid)
            )
            return int(result.inserted_primary_key[0])

    return _add


@pytest.fixture
def attachments():
    return [
        Attachment(file_name="abc.png", ext=".png"),
        Attachment(file_name="bcd.png", ext=".png", crops=(make_crop(200, 180), make_crop(400, 320))),
        Attachment(file_name="rjj.jpeg", ext=".jpeg", crops=(make_crop(600, 450),)),
        Attachment(file_name="rrrr-aa.png", ext=".png", crops=(make_crop(200, 180),)),
    ]

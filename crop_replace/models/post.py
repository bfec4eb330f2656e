"""WordPress posts 테이블의 SQLAlchemy 테이블 정의입니다."""

from sqlalchemy import BigInteger, Column, Index, Integer, MetaData, String, Table, Text


def build_posts_table(prefix: str, metadata: MetaData | None = None) -> Table:
    """`<prefix>posts` 테이블 중 이 도구가 읽고 쓰는 컬럼만 정의한다."""
    metadata = metadata if metadata is not None else MetaData()
    name = f"{prefix}posts"
    return Table(
        name,
        metadata,
        Column("ID", BigInteger().with_variant(Integer(), "sqlite"), primary_key=True, autoincrement=True),
        Column("post_type", String(20), nullable=False, default="post"),
        Column("guid", String(255), nullable=False, default=""),
        Column("post_content", Text, nullable=False, default=""),
        Index(f"idx_{name}_type", "post_type", "ID"),
        extend_existing=True,
    )

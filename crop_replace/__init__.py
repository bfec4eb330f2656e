"""WordPress 본문의 누락된 이미지 크롭 참조를 치환하는 도구 패키지입니다."""

__version__ = "1.0.0"

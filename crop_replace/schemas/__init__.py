"""Pydantic 스키마 패키지 초기화 모듈입니다."""

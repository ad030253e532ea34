"""
Core layer: 파일 시스템 접근.

역할:
- 원본 문서 읽기 (읽기 전용)
"""

from .source import read_document

__all__ = [
    "read_document",
]

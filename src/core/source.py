"""
Document source: 원본 Markdown 파일 읽기.

규칙:
- 요청마다 새로 읽음 (캐시 금지 → stale 불가)
- 읽기 전용, 쓰기 없음
- 실패 시 FileAccessError (빈 문서로 대체 금지)
"""

import logging
from pathlib import Path

from src.domain.constants import SOURCE_ENCODING
from src.domain.errors import ErrorCodes, FileAccessError
from src.domain.schemas import Document

logger = logging.getLogger(__name__)


def read_document(path: Path, encoding: str = SOURCE_ENCODING) -> Document:
    """
    Markdown 파일 전체를 텍스트로 읽기.

    Args:
        path: 원본 파일 경로
        encoding: 텍스트 인코딩 (기본 UTF-8)

    Returns:
        Document

    Raises:
        FileAccessError: SOURCE_NOT_FOUND, SOURCE_UNREADABLE, SOURCE_DECODE_FAILED
    """
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise FileAccessError(ErrorCodes.SOURCE_NOT_FOUND, path=str(path)) from e
    except UnicodeDecodeError as e:
        raise FileAccessError(
            ErrorCodes.SOURCE_DECODE_FAILED,
            path=str(path),
            encoding=encoding,
            error=str(e),
        ) from e
    except OSError as e:
        # 권한 없음, 디렉터리 등
        raise FileAccessError(
            ErrorCodes.SOURCE_UNREADABLE,
            path=str(path),
            error=str(e),
        ) from e

    logger.debug(f"Read {len(text)} chars from {path}")
    return Document(path=path, text=text)

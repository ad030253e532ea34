"""
test_source.py - 원본 문서 읽기 테스트

DoD:
- 파일 전체를 UTF-8 텍스트로 읽음
- 없음/읽기 불가/디코딩 실패 → FileAccessError
"""

from pathlib import Path

import pytest

from src.core.source import read_document
from src.domain.errors import ErrorCodes, FileAccessError


class TestReadDocument:
    """read_document 함수 테스트."""

    def test_reads_entire_file(self, tmp_path: Path):
        """파일 전체 내용을 읽음."""
        path = tmp_path / "index.md"
        path.write_text("# Title\n\nBody line.\n", encoding="utf-8")

        document = read_document(path)

        assert document.path == path
        assert document.text == "# Title\n\nBody line.\n"

    def test_reads_utf8(self, tmp_path: Path):
        """UTF-8 다국어 텍스트."""
        path = tmp_path / "index.md"
        path.write_text("# 안녕하세요\n", encoding="utf-8")

        assert read_document(path).text == "# 안녕하세요\n"

    def test_empty_file(self, tmp_path: Path):
        """빈 파일은 빈 문서 (에러 아님)."""
        path = tmp_path / "index.md"
        path.write_text("", encoding="utf-8")

        assert read_document(path).text == ""

    def test_rereads_on_each_call(self, tmp_path: Path):
        """호출마다 새로 읽음."""
        path = tmp_path / "index.md"
        path.write_text("first", encoding="utf-8")
        assert read_document(path).text == "first"

        path.write_text("second", encoding="utf-8")
        assert read_document(path).text == "second"

    def test_missing_file_raises(self, tmp_path: Path):
        """파일 없음 → SOURCE_NOT_FOUND."""
        path = tmp_path / "missing.md"

        with pytest.raises(FileAccessError) as exc_info:
            read_document(path)

        assert exc_info.value.code == ErrorCodes.SOURCE_NOT_FOUND
        assert exc_info.value.context["path"] == str(path)

    def test_directory_raises(self, tmp_path: Path):
        """디렉터리 → SOURCE_UNREADABLE."""
        directory = tmp_path / "index.md"
        directory.mkdir()

        with pytest.raises(FileAccessError) as exc_info:
            read_document(directory)

        assert exc_info.value.code == ErrorCodes.SOURCE_UNREADABLE

    def test_invalid_utf8_raises(self, tmp_path: Path):
        """UTF-8 아님 → SOURCE_DECODE_FAILED."""
        path = tmp_path / "index.md"
        path.write_bytes(b"\xff\xfe\xfa invalid")

        with pytest.raises(FileAccessError) as exc_info:
            read_document(path)

        assert exc_info.value.code == ErrorCodes.SOURCE_DECODE_FAILED

"""
Unit Tests for FileNumberSource.

Test Aspects Covered:
    ✅ Business Logic: Whitespace-separated integers in file order
    ✅ Edge Cases: Empty file, signs, newlines/tabs, early stop on bad token
    ✅ Error Handling: Missing file, directory, undecodable content
"""

from __future__ import annotations

from pathlib import Path

import pytest

from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.domain.exceptions import NumberFileNotFoundError, NumberSourceError
from number_pipeline.interfaces.number_source import NumberSource


class TestFileNumberSource:
    """Test cases for reading numbers."""

    def test_reads_numbers_in_order(self, source: FileNumberSource, numbers_file: Path) -> None:
        assert source.read_numbers(numbers_file) == (1, 2, 3, 4, 5, 6)

    def test_accepts_string_path(self, source: FileNumberSource, numbers_file: Path) -> None:
        assert source.read_numbers(str(numbers_file)) == (1, 2, 3, 4, 5, 6)

    def test_mixed_whitespace_and_signs(self, source: FileNumberSource, tmp_path: Path) -> None:
        path = tmp_path / "mixed.txt"
        path.write_text("  -3\n\t+4  0\r\n12345678901234567890\n")

        assert source.read_numbers(path) == (-3, 4, 0, 12345678901234567890)

    def test_empty_file_returns_empty(self, source: FileNumberSource, empty_file: Path) -> None:
        """
        SCENARIO: File exists but has no content
        EXPECTED: Empty tuple, no error
        """
        assert source.read_numbers(empty_file) == ()

    def test_whitespace_only_file_returns_empty(
        self, source: FileNumberSource, tmp_path: Path
    ) -> None:
        path = tmp_path / "blank.txt"
        path.write_text(" \n\n\t ")

        assert source.read_numbers(path) == ()

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("1 2 x 3", (1, 2)),
            ("abc 1 2", ()),
            ("1 2.5 3", (1,)),
            ("4 5abc 6", (4,)),
        ],
    )
    def test_stops_at_first_non_integer(
        self,
        source: FileNumberSource,
        tmp_path: Path,
        content: str,
        expected: tuple,
    ) -> None:
        """
        SCENARIO: Non-integer token in the middle of the file
        EXPECTED: Numbers before it are returned, the rest is ignored
        """
        path = tmp_path / "partial.txt"
        path.write_text(content)

        assert source.read_numbers(path) == expected

    def test_missing_file_raises_not_found(
        self, source: FileNumberSource, missing_file: Path
    ) -> None:
        """
        SCENARIO: Path does not exist
        EXPECTED: NumberFileNotFoundError, distinct from an empty result
        """
        with pytest.raises(NumberFileNotFoundError) as exc:
            source.read_numbers(missing_file)

        assert exc.value.path == missing_file
        assert isinstance(exc.value, NumberSourceError)
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_directory_raises_source_error(
        self, source: FileNumberSource, tmp_path: Path
    ) -> None:
        with pytest.raises(NumberSourceError):
            source.read_numbers(tmp_path)

    def test_undecodable_file_raises_source_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 2 \xff\xfe 3")

        with pytest.raises(NumberSourceError, match="not valid utf-8"):
            FileNumberSource(encoding="utf-8").read_numbers(path)

    def test_configured_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "utf16.txt"
        path.write_text("7 8 9", encoding="utf-16")

        assert FileNumberSource(encoding="utf-16").read_numbers(path) == (7, 8, 9)

    def test_satisfies_protocol(self, source: FileNumberSource) -> None:
        assert isinstance(source, NumberSource)

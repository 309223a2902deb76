"""
Tests for item fetcher implementations.

Focus on where reading stops and which lines become labels.
"""

import io
from pathlib import Path

import pytest
from preference_ranker.fetchers import FileItemFetcher, LineItemFetcher


class TestLineItemFetcher:
    """Test LineItemFetcher behavior through public interface."""

    def test_stops_at_blank_line(self):
        """Lines after the blank line belong to whoever reads next."""
        # Arrange
        stream = io.StringIO("Apples\nBananas\n\na\n")
        prompt = io.StringIO()
        fetcher = LineItemFetcher(stream, prompt_stream=prompt)

        # Act
        labels = list(fetcher.list_labels())

        # Assert
        assert labels == ["Apples", "Bananas"]
        assert stream.readline() == "a\n", "Stream should be left after the blank line"
        assert "Enter one option per line" in prompt.getvalue()

    def test_reads_to_eof_without_blank_line(self):
        fetcher = LineItemFetcher(io.StringIO("  padded label\r\nlast"))

        assert list(fetcher.list_labels()) == ["  padded label", "last"]

    def test_whitespace_only_line_is_a_label(self):
        """Only an empty line ends the list."""
        # Arrange
        fetcher = LineItemFetcher(io.StringIO("A\n   \nB\n\n"))

        # Act
        labels = list(fetcher.list_labels())

        # Assert
        assert labels == ["A", "   ", "B"]

    def test_empty_input(self):
        fetcher = LineItemFetcher(io.StringIO(""))

        assert list(fetcher.list_labels()) == []


class TestFileItemFetcher:
    """Test FileItemFetcher behavior through public interface."""

    def test_skips_blank_lines(self, tmp_path: Path):
        # Arrange
        items_file = tmp_path / "items.txt"
        items_file.write_text("Apples\n\n  Bananas  \n\nCherries\n", encoding="utf-8")
        fetcher = FileItemFetcher(items_file)

        # Act
        labels = list(fetcher.list_labels())

        # Assert
        assert labels == ["Apples", "Bananas", "Cherries"]

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            FileItemFetcher(tmp_path / "missing.txt")

    def test_directory_raises(self, tmp_path: Path):
        with pytest.raises(IsADirectoryError):
            FileItemFetcher(tmp_path)

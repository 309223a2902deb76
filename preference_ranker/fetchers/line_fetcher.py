"""
Line-based item fetchers.

Reads item labels one per line, either interactively from a stream or from
a text file.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from typing_extensions import override

from ..interfaces import ItemFetcher
from ..logging_config import get_logger

PROMPT = "Enter one option per line. Enter a blank line when done.\n"


class LineItemFetcher(ItemFetcher):
    """
    Fetcher reading labels from a text stream until an empty line or EOF.

    Labels are kept as typed, minus the trailing newline.
    """

    def __init__(self, stream: TextIO, prompt_stream: TextIO | None = None):
        """
        Initialize line fetcher.

        Args:
            stream: Stream to read labels from
            prompt_stream: Where to print the instructions (None = no prompt)
        """
        self.stream: TextIO = stream
        self.prompt_stream: TextIO | None = prompt_stream
        self.logger = get_logger("line_fetcher")

    @override
    def list_labels(self) -> Iterable[str]:
        """Read labels up to the first empty line."""
        if self.prompt_stream is not None:
            _ = self.prompt_stream.write(PROMPT)
            self.prompt_stream.flush()

        labels = list[str]()
        # readline keeps the stream positioned for the judge that reads next
        while True:
            line = self.stream.readline()
            if line == "":
                break
            label = line.rstrip("\r\n")
            if label == "":
                break
            labels.append(label)

        if not labels:
            self.logger.warning("No items entered")
        self.logger.info(f"Read {len(labels)} items")
        return labels


class FileItemFetcher(ItemFetcher):
    """Fetcher reading every non-blank line of a text file."""

    def __init__(self, items_file: Path, encoding: str = "utf-8"):
        """
        Initialize file fetcher.

        Args:
            items_file: Text file with one label per line
            encoding: File encoding
        """
        self.items_file: Path = Path(items_file)
        self.encoding: str = encoding
        self.logger = get_logger("file_fetcher")

        if not self.items_file.exists():
            raise FileNotFoundError(f"Items file does not exist: {self.items_file}")
        if self.items_file.is_dir():
            raise IsADirectoryError(f"Items path is a directory: {self.items_file}")

    @override
    def list_labels(self) -> Iterable[str]:
        """Return stripped labels, skipping blank lines."""
        with open(self.items_file, encoding=self.encoding) as f:
            labels = [line.strip() for line in f if line.strip()]

        if not labels:
            self.logger.warning(f"No items found in {self.items_file}")
        self.logger.info(f"Loaded {len(labels)} items from {self.items_file}")
        return labels

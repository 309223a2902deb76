"""
Item fetcher implementations.

Provides implementations of the ItemFetcher interface for loading the labels
to rank.

Available implementations:
- LineItemFetcher: Reads labels from a stream until a blank line
- FileItemFetcher: Reads every non-blank line of a text file
"""

from .line_fetcher import FileItemFetcher, LineItemFetcher

__all__ = ["FileItemFetcher", "LineItemFetcher"]

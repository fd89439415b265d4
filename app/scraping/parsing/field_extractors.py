"""
Selector-driven field extraction for scraped listing nodes.
"""

from __future__ import annotations

import re

from bs4 import Tag

from app.domain.actor import RANK_MAX, RANK_MIN
from app.scraping.navigation import CSSSelectorNavigator, NodeNavigator

_INTEGER_REGEX = re.compile(r"[+-]?\d+")
TYPE_DELIMITER = "|"


class FieldExtractor:
    """
    Locates single descendants by selector and normalizes their text.
    """

    def __init__(self, navigator: NodeNavigator | None = None) -> None:
        self.navigator = navigator or CSSSelectorNavigator()

    def extract_text(self, node: Tag, selector: str) -> str | None:
        """
        Return the trimmed text of the first match, or None when nothing matches.
        """

        match = self.navigator.select_one(node, selector)
        if match is None:
            return None
        return match.get_text().strip()

    def extract_rank(self, node: Tag, selector: str) -> int:
        """
        Parse a rank such as "12." into 12.

        Unparseable, missing or out-of-range (beyond 32 bits) ranks are 0.
        """

        text = self.extract_text(node, selector)
        if text is None:
            return 0
        cleaned = text.replace(".", "").strip()
        if not _INTEGER_REGEX.fullmatch(cleaned):
            return 0
        rank = int(cleaned)
        if not RANK_MIN <= rank <= RANK_MAX:
            return 0
        return rank

    def extract_type(self, node: Tag, selector: str) -> str:
        """
        Keep the label before the first "|" ("Actor | Producer" -> "Actor").
        """

        text = self.extract_text(node, selector)
        if text is None:
            return ""
        prefix, _, _ = text.partition(TYPE_DELIMITER)
        return prefix.strip()

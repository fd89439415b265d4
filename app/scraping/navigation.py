"""
Tree navigation primitives used by the extraction layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import Tag


class NodeNavigator(ABC):
    """
    Resolves provider selectors relative to a parsed document node.
    """

    @abstractmethod
    def select_all(self, node: Tag, selector: str) -> list[Tag]:
        """
        Return every node matching `selector` under `node`.
        """

    @abstractmethod
    def select_one(self, node: Tag, selector: str) -> Tag | None:
        """
        Return the first node matching `selector` under `node`, if any.
        """


class CSSSelectorNavigator(NodeNavigator):
    """
    CSS selector dialect backed by BeautifulSoup (soupsieve).
    """

    def select_all(self, node: Tag, selector: str) -> list[Tag]:
        if not selector:
            return []
        return list(node.select(selector))

    def select_one(self, node: Tag, selector: str) -> Tag | None:
        if not selector:
            return None
        return node.select_one(selector)

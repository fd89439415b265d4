"""
Builds candidate actor records from listing nodes.
"""

from __future__ import annotations

from bs4 import Tag

from app.domain.actor import CandidateRecord
from app.scraping.config.models import ProviderConfig
from app.scraping.parsing.field_extractors import FieldExtractor


class RecordBuilder:
    """
    Applies a provider's selector set to one candidate node.

    Building never rejects a node; fields whose selectors do not match carry
    their defaults and filtering is left to the caller.
    """

    def __init__(self, extractor: FieldExtractor | None = None) -> None:
        self.extractor = extractor or FieldExtractor()

    def build(self, node: Tag, config: ProviderConfig) -> CandidateRecord:
        return CandidateRecord(
            name=self.extractor.extract_text(node, config.name_selector),
            rank=self.extractor.extract_rank(node, config.rank_selector),
            details=self.extractor.extract_text(node, config.details_selector),
            type=self.extractor.extract_type(node, config.type_selector),
        )

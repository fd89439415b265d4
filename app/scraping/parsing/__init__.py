"""
Parsing layer exports.
"""

from app.scraping.parsing.field_extractors import FieldExtractor
from app.scraping.parsing.record_builder import RecordBuilder

__all__ = ["FieldExtractor", "RecordBuilder"]

"""
comment_parser — skanery bajtów źródła dla sdoc.

Publiczne API:
  extract_comments(data)        → tekst Markdown z bloków API (bytes)
  CommentExtractor              ekstraktor z raportem (ExtractResult)
  split_sections(data)          → SectionList (dokumentacja, kod)
  format_report(sections)       → raport trybu docco (bytes)
  reencode_byte(ch) / reencode  heurystyka Latin-1 → UTF-8
"""

from .encoding  import LATIN1_UMLAUTS, reencode, reencode_byte
from .extractor import CommentExtractor, ExtractResult, HeaderAttribute, extract_comments
from .docco     import format_report, split_sections

__all__ = [
    "LATIN1_UMLAUTS",
    "reencode",
    "reencode_byte",
    "CommentExtractor",
    "ExtractResult",
    "HeaderAttribute",
    "extract_comments",
    "format_report",
    "split_sections",
]

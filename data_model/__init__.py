"""
data_model — struktury danych sdoc.

Użycie:
  from data_model import Slice, Section, SectionList

Moduły:
  slices   — Slice (widok na bufor bajtów), header_before
  sections — Section (dokumentacja, kod), SectionList
"""

from .slices import (
    WHITESPACE,
    Slice,
    header_before,
)
from .sections import (
    Section,
    SectionList,
)

__all__ = [
    # slices
    "WHITESPACE",
    "Slice",
    "header_before",
    # sections
    "Section",
    "SectionList",
]

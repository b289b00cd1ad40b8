"""
data_model/sections.py — sekcje dokumentacji literackiej (doc, code).

Section to para buforów: tekst dokumentacji i kod, który po nim następuje.
Kolejne sekcje tworzą SectionList w kolejności pliku źródłowego.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(slots=True)
class Section:
    doc:  bytearray = field(default_factory=bytearray)   # linie komentarza bez markera
    code: bytearray = field(default_factory=bytearray)   # pełne linie kodu

    def doc_text(self) -> str:
        return self.doc.decode("utf-8", errors="replace")

    def code_text(self) -> str:
        return self.code.decode("utf-8", errors="replace")

    def doc_lines(self) -> int:
        return self.doc.count(b"\n")

    def code_lines(self) -> int:
        return self.code.count(b"\n")


# Kolekcja sekcji w kolejności dokumentu.
SectionList: TypeAlias = list[Section]

"""
comment_parser/docco.py — podział źródła na sekcje (dokumentacja, kod).

Każda linia jest klasyfikowana jako:
  - komentarz: po wiodących białych znakach zaczyna się od '*' albo '%*'
  - pusta:     same białe znaki
  - kod:       wszystko inne

Kolejne linie komentarza tworzą dokumentację sekcji, a linie kodu za nimi
jej kod. Nowa sekcja zaczyna się, gdy komentarz pojawia się po kodzie albo
gdy dwa bloki dokumentacji rozdziela pusta linia (pierwszy z nich staje się
sekcją bez kodu). Puste linie na końcu kodu sekcji są pomijane.
"""

from __future__ import annotations

from data_model.sections import Section, SectionList
from data_model.slices import WHITESPACE

_NL      = ord("\n")
_STAR    = ord("*")
_PERCENT = ord("%")


def _comment_marker_length(line: bytes) -> int:
    """Długość wcięcia + markera komentarza ('*' lub '%*'); 0 gdy to nie komentarz."""
    j = 0
    while j < len(line) and line[j] != _NL and line[j] in WHITESPACE:
        j += 1
    if j >= len(line) or line[j] == _NL:
        return 0
    if line[j] == _STAR:
        return j + 1
    if line[j] == _PERCENT and j + 1 < len(line) and line[j + 1] == _STAR:
        return j + 2
    return 0


def _iter_lines(data: bytes):
    """Linie razem z '\\n' (ostatnia może go nie mieć)."""
    i = 0
    while i < len(data):
        nl = data.find(b"\n", i)
        end = len(data) if nl == -1 else nl + 1
        yield data[i:end]
        i = end


def split_sections(data: bytes) -> SectionList:
    sections: SectionList = [Section()]
    have_doc = have_code = prev_empty = False
    pending = bytearray()   # puste linie czekające na następną linię kodu

    for line in _iter_lines(bytes(data)):
        empty = not line.strip()
        marker = _comment_marker_length(line)

        if marker:
            if prev_empty and have_doc and not have_code:
                # doc <pusta> doc: pierwszy blok to sekcja bez kodu
                sections.append(Section())
                have_doc = False
            if have_code:
                sections.append(Section())
                have_code = False
            pending.clear()
            have_doc = True
            text = line[marker:]
            if text.startswith(b" "):
                text = text[1:]
            sections[-1].doc += text
        elif empty:
            pending += line
        else:
            have_code = True
            sections[-1].code += pending
            sections[-1].code += line
            pending.clear()

        prev_empty = empty

    return sections


def format_report(sections: SectionList) -> bytes:
    """
    Raport trybu docco: licznik sekcji i surowe bajty dokumentacji każdej
    z nich (bez dekodowania, Latin-1 zostaje Latin-1).
    """
    out = bytearray(f"found {len(sections)}/{len(sections)} sections\n".encode("ascii"))
    for n, section in enumerate(sections):
        out += f"section {n}:\n".encode("ascii")
        out += section.doc
    return bytes(out)

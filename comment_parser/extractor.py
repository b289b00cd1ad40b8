"""
comment_parser/extractor.py — ekstrakcja bloków komentarzy API ze źródeł.

Architektura:
  bajty źródła → CommentExtractor.run() (jedno przejście, okno 2 bajtów)
  → tekst Markdown z blokami API + atrybuty nagłówków {#id} / {.klasa}
  → renderer Markdown (renderer/markdown_html.py)

Blok API zaczyna się od "/**" i kończy na "**/" albo "*/". Tekst poza
blokami jest pomijany; po każdym zamkniętym bloku dopisujemy '\\n', żeby
renderer zaczął nowy akapit.

Nagłówki w blokach:
  ### tekst ###     → "### tekst {#id}"  — id to identyfikator z nagłówka;
                      gdy tekst zawiera '&' lub '%', bierzemy identyfikator
                      stojący za pierwszym takim znakiem
  #### tekst ####   → "#### tekst {.tekst}" — cały tekst jako klasa HTML

Idea: poziom 3 dla nazw funkcji/struktur, poziom 4 dla standardowych
podsekcji ("parameters", "returns", ...).

Zamykanie nagłówków:
  - nagłówek poziomu 3 zamknięty końcem linii dostaje atrybut przed '\\n',
    a sam '\\n' jest kopiowany (nagłówek zostaje w osobnej linii)
  - gdy wyjście nie kończy się białym znakiem, przed '{' wstawiamy spację
    (attr_list rozpoznaje tylko " {...}" na końcu nagłówka)
  - bez tych dwóch kroków "### Foo\\nbar" dałoby "### Foo{#Foo}bar"

Wejście zniekształcone (niezamknięty blok, nagłówek bez tekstu, koniec
bufora w trakcie nagłówka) nigdy nie powoduje wyjątku — wynik jest
najlepszym możliwym przybliżeniem.

Publiczne API:
  extract_comments(data) -> bytes
  CommentExtractor().run(data) -> ExtractResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from comment_parser.encoding import reencode_byte
from data_model.slices import WHITESPACE, Slice, header_before

_SLASH = ord("/")
_STAR  = ord("*")
_POUND = ord("#")
_NL    = ord("\n")
_SPACE = ord(" ")

# Znaki poprzedzające identyfikator w nagłówku poziomu 3 (np. "&init_func").
_ID_SIGILS = b"&%"

# Bajty pomijane po zamknięciu nagłówka ('#' zamykający już przeczytany).
_SKIP_AFTER_H3 = 2
_SKIP_AFTER_H4 = 3

_AttrKind = Literal["id", "class"]


# ---------------------------------------------------------------------------
# Wynik ekstrakcji
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HeaderAttribute:
    """Atrybut dopisany do nagłówka: {#raw} dla id albo {.raw} dla klasy."""
    kind: _AttrKind
    raw:  bytes

    @property
    def value(self) -> str:
        return self.raw.decode("utf-8", errors="replace")

    def markup(self) -> bytes:
        marker = b"#" if self.kind == "id" else b"."
        return b"{" + marker + self.raw + b"}"


@dataclass(slots=True)
class ExtractResult:
    text:         bytes                  # tekst Markdown gotowy dla renderera
    blocks:       int = 0                # liczba zamkniętych bloków API
    headers:      list[HeaderAttribute] = field(default_factory=list)
    unterminated: bool = False           # wejście skończyło się wewnątrz bloku


# ---------------------------------------------------------------------------
# Ekstraktor
# ---------------------------------------------------------------------------

class CommentExtractor:
    """
    Skaner bloków komentarzy API.

    Stan (pozycja, "w bloku", licznik kolejnych '#', poziom otwartego
    nagłówka 0/3/4) istnieje tylko w trakcie jednego wywołania run();
    każde wywołanie zaczyna od czystego stanu i własnego bufora wyjścia.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._out = bytearray()
        self._in_block = False
        self._pounds = 0
        self._header = 0
        self._blocks = 0
        self._headers: list[HeaderAttribute] = []

    def run(self, data: bytes) -> ExtractResult:
        self._reset()
        data = bytes(data)
        size = len(data)
        i = 0
        while i < size:
            ch = data[i]

            # "/**" otwiera blok; pomijamy też jeden bajt separatora za nim
            if ch == _SLASH and i + 2 < size and data[i + 1] == _STAR and data[i + 2] == _STAR:
                self._in_block = True
                i += 4
                continue

            if ch == _STAR and _closes_block(data, i):
                if self._in_block:
                    self._out.append(_NL)
                    self._blocks += 1
                self._in_block = False
                i += 1
                continue

            if not self._in_block:
                i += 1
                continue

            i = self._scan(data, i)

        result = ExtractResult(
            text=bytes(self._out),
            blocks=self._blocks,
            headers=self._headers,
            unterminated=self._in_block,
        )
        self._reset()
        return result

    def _scan(self, data: bytes, i: int) -> int:
        """Przetwarza bajt data[i] wewnątrz bloku; zwraca pozycję następnego."""
        ch = data[i]

        if ch == _POUND:
            self._pounds += 1

        if self._pounds == 3 and ch != _POUND:
            self._header = 3
        if self._header == 3 and ch in (_POUND, _NL):
            text = header_before(data, i).trim()
            mark = text.find(_ID_SIGILS)
            if mark != -1:
                text = text.substring(mark + 1)
            self._annotate("id", text.id_prefix())
            self._pounds = 0
            self._header = 0
            if ch == _POUND:
                return i + 1 + _SKIP_AFTER_H3
            self._out.append(_NL)  # koniec linii nagłówka zostaje w wyjściu
            return i + 1

        if self._pounds == 4 and ch != _POUND:
            self._header = 4
        if self._header == 4 and ch == _POUND:
            self._annotate("class", header_before(data, i).trim())
            self._pounds = 0
            self._header = 0
            return i + 1 + _SKIP_AFTER_H4

        if self._pounds and ch != _POUND:
            self._pounds = 0
        if ch == _NL:
            self._header = 0

        self._out += reencode_byte(ch)
        return i + 1

    def _annotate(self, kind: _AttrKind, text: Slice) -> None:
        attr = HeaderAttribute(kind, text.data())
        # składnia atrybutów wymaga spacji przed '{'
        if self._out and self._out[-1] not in WHITESPACE:
            self._out.append(_SPACE)
        self._out += attr.markup()
        self._headers.append(attr)


def _closes_block(data: bytes, i: int) -> bool:
    """True gdy od pozycji i zaczyna się "**/" albo "*/"."""
    size = len(data)
    if i + 2 < size and data[i + 1] == _STAR and data[i + 2] == _SLASH:
        return True
    return i + 1 < size and data[i + 1] == _SLASH


def extract_comments(data: bytes) -> bytes:
    """Zwraca tekst wszystkich bloków API z adnotacjami nagłówków."""
    return CommentExtractor().run(data).text

"""
data_model/slices.py — widok Slice na bufor bajtów (bez kopiowania).

Slice nazywa fragment istniejącego bufora: (buf, pos, length). Nie jest
właścicielem danych; operacje zwracają nowe widoki na ten sam bufor.
Niezmiennik: 0 <= pos, 0 <= length, pos + length <= len(buf).

Skaner identyfikatorów:
  Slice.id_prefix_length()  długość wiodącego ciągu [A-Za-z0-9_]
  header_before(buf, end)   widok od ostatniego '#' przed `end` do `end`
"""

from __future__ import annotations

from dataclasses import dataclass

# białe znaki ASCII: spacja, \t, \n, \v, \f, \r
WHITESPACE = frozenset(b" \t\n\v\f\r")

_ID_BYTES = frozenset(
    b"abcdefghijklmnopqrstuvwxyz"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"0123456789_"
)


@dataclass(frozen=True, slots=True)
class Slice:
    """Fragment bufora `buf` od pozycji `pos` o długości `length`."""
    buf:    bytes
    pos:    int
    length: int

    def __post_init__(self) -> None:
        if self.pos < 0 or self.length < 0:
            raise ValueError(f"Ujemna pozycja lub długość: pos={self.pos}, length={self.length}")
        if self.pos + self.length > len(self.buf):
            raise ValueError(
                f"Slice poza buforem: {self.pos}+{self.length} > {len(self.buf)}"
            )

    def __len__(self) -> int:
        return self.length

    @property
    def end(self) -> int:
        return self.pos + self.length

    def data(self) -> bytes:
        """Zwraca kopię bajtów widoku."""
        return self.buf[self.pos:self.end]

    def trim(self) -> Slice:
        """Usuwa białe znaki z początku i końca (pusty wynik dla samych spacji)."""
        start, stop = self.pos, self.end
        while start < stop and self.buf[start] in WHITESPACE:
            start += 1
        while stop > start and self.buf[stop - 1] in WHITESPACE:
            stop -= 1
        return Slice(self.buf, start, stop - start)

    def find(self, chars: bytes) -> int:
        """
        Pozycja (względem początku widoku) pierwszego bajtu należącego
        do `chars`, albo -1 gdy żaden nie występuje.
        """
        for i in range(self.pos, self.end):
            if self.buf[i] in chars:
                return i - self.pos
        return -1

    def substring(self, start: int, length: int = 0) -> Slice:
        """
        Podciąg zaczynający się `start` bajtów od początku widoku.

        length == 0 oznacza "do końca widoku". start == len(self) daje
        pusty widok.
        """
        if start < 0 or start > self.length:
            raise ValueError(f"Początek podciągu poza widokiem: {start} (len={self.length})")
        rest = self.length - start
        if length > 0:
            rest = min(length, rest)
        return Slice(self.buf, self.pos + start, rest)

    def id_prefix_length(self) -> int:
        """Długość najdłuższego prefiksu złożonego z liter, cyfr ASCII i '_'."""
        i = self.pos
        while i < self.end and self.buf[i] in _ID_BYTES:
            i += 1
        return i - self.pos

    def id_prefix(self) -> Slice:
        return Slice(self.buf, self.pos, self.id_prefix_length())


def header_before(buf: bytes, end: int) -> Slice:
    """
    Tekst nagłówka: widok od bajtu po ostatnim '#' przed pozycją `end`
    do `end` (wyłącznie). Bez '#' w buforze widok zaczyna się od 0.
    """
    k = end - 1
    while k >= 0 and buf[k] != ord("#"):
        k -= 1
    return Slice(buf, k + 1, end - k - 1)

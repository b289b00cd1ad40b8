"""
comment_parser/encoding.py — heurystyczne przekodowanie bajtów na UTF-8.

Komentarze w źródłach bywają zapisane w Latin-1 albo w UTF-8. Nie jest to
detektor kodowania: rozpoznajemy wyłącznie niemieckie znaki diakrytyczne
(Ä ä Ö ö Ü ü ß) zapisane w Latin-1 i zamieniamy je na dwubajtowy UTF-8.
Każdy inny bajt >= 128 przechodzi bez zmian — błędne sekwencje UTF-8
przechodzą dalej niepoprawione, bez wyjątku.

Ograniczenie: inne znaki Latin-1 (é, ñ, ...) nie są konwertowane.
"""

from __future__ import annotations

# Ä ä Ö ö Ü ü ß w Latin-1
LATIN1_UMLAUTS: frozenset[int] = frozenset({196, 228, 214, 246, 220, 252, 223})


def reencode_byte(ch: int) -> bytes:
    """Zwraca 1 lub 2 bajty wyjściowe dla bajtu wejściowego `ch`."""
    if not 0 <= ch <= 0xFF:
        raise ValueError(f"Wartość spoza zakresu bajtu: {ch}")
    if ch < 128:
        return bytes((ch,))
    if ch in LATIN1_UMLAUTS:
        return bytes((0xC2 + (ch > 0xBF), (ch & 0x3F) | 0x80))
    # zakładamy, że to już bajt UTF-8
    return bytes((ch,))


def reencode(data: bytes) -> bytes:
    out = bytearray()
    for ch in data:
        out += reencode_byte(ch)
    return bytes(out)

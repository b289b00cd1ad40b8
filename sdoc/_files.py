"""Wczytywanie plików wejściowych — cała zawartość, sklejona w kolejności argumentów."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class SourceReadError(OSError):
    """Nie udało się otworzyć/odczytać jednego z plików wejściowych."""


def read_sources(paths: Iterable[str | Path]) -> bytes:
    """
    Zwraca zawartość wszystkich plików sklejoną bez separatora.

    Blok komentarza niezamknięty w jednym pliku jest kontynuowany w
    następnym. Pierwszy błąd przerywa całe wczytywanie (SourceReadError).
    """
    chunks: list[bytes] = []
    for path in paths:
        p = Path(path)
        try:
            chunks.append(p.read_bytes())
        except OSError as e:
            reason = e.strerror or str(e)
            raise SourceReadError(f'Nie można otworzyć pliku wejściowego "{p}": {reason}') from e
    return b"".join(chunks)

"""
Cursor — minimalny prymityw skanujący po łańcuchu wejściowym.

Jedyny stan to pozycja. Odczyt za końcem zwraca END (None) i nie jest
błędem; błędem staje się dopiero gdy gramatyka wymaga tam tokenu.
"""
from __future__ import annotations

from typing import Optional

END = None

_WHITESPACE = (" ", "\t")


class Cursor:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> Optional[str]:
        """Bieżący znak albo END."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return END

    def advance(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def skip_whitespace(self) -> None:
        """Pomija tylko spacje i tabulatory."""
        while self.peek() in _WHITESPACE:
            self.advance()

    def at_end(self) -> bool:
        return self.peek() is END

    def rest(self) -> str:
        return self._text[self._pos:]

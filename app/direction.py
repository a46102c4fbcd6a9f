from __future__ import annotations

from dataclasses import dataclass


def direction_for(lang: str) -> str:
    return "rtl" if lang == "ar" else "ltr"


@dataclass
class DocumentAttributes:
    """The <html lang dir> pair every rendered component inherits."""
    lang: str = "it"
    dir: str = "ltr"
    writes: int = 0

    def set(self, lang: str, dir: str) -> None:
        self.lang = lang
        self.dir = dir
        self.writes += 1


class DirectionalityController:
    """Pushes the document lang/dir pair whenever the UI language changes.

    Writes only when the pair actually changes, so repeating a language
    switch leaves the document untouched.
    """

    def __init__(self, sink: DocumentAttributes):
        self.sink = sink
        self._applied: tuple[str, str] | None = None

    def apply(self, lang: str) -> None:
        pair = (lang, direction_for(lang))
        if pair == self._applied:
            return
        self.sink.set(*pair)
        self._applied = pair

    @property
    def is_rtl(self) -> bool:
        return self._applied is not None and self._applied[1] == "rtl"

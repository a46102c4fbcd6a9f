from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.catalog import opposite_language
from app.direction import direction_for
from app.preferences import PreferenceStore


@dataclass(frozen=True)
class ContentBlock:
    text: str
    lang: str
    secondary: bool = False

    @property
    def dir(self) -> str:
        return direction_for(self.lang)

    def as_dict(self) -> dict:
        return {"text": self.text, "lang": self.lang, "dir": self.dir, "secondary": self.secondary}


def resolve_content(ar: str, it: str, content_mode: str, ui_language: str) -> list[ContentBlock]:
    """Order a bilingual pair for display. The primary block is always first.

    A pinned content mode ignores the UI language entirely; in "both" mode the
    UI language decides which of the pair leads.
    """
    if content_mode == "ar":
        return [ContentBlock(ar, "ar")]
    if content_mode == "it":
        return [ContentBlock(it, "it")]
    if ui_language == "ar":
        return [ContentBlock(ar, "ar"), ContentBlock(it, "it", secondary=True)]
    return [ContentBlock(it, "it"), ContentBlock(ar, "ar", secondary=True)]


class ContentResolver:
    def __init__(self, prefs: PreferenceStore):
        self.prefs = prefs

    def resolve(self, ar: str, it: str) -> list[ContentBlock]:
        return resolve_content(ar, it, self.prefs.content_mode, self.prefs.ui_language)

    __call__ = resolve


class ItemProgress:
    """unanswered -> answered, nothing else. A new item gets a new instance."""

    def __init__(self, item_id: Optional[int] = None, answered: bool = False):
        self.item_id = item_id
        self.answered = answered

    def mark_answered(self) -> None:
        self.answered = True

    def for_item(self, item_id: Optional[int]) -> "ItemProgress":
        if item_id == self.item_id:
            return self
        return ItemProgress(item_id)


@dataclass(frozen=True)
class RevealPlan:
    blocks: list[ContentBlock]
    reveal: Optional[ContentBlock] = None

    def as_dict(self) -> dict:
        return {
            "blocks": [b.as_dict() for b in self.blocks],
            "reveal": self.reveal.as_dict() if self.reveal else None,
        }


class SmartRevealPolicy:
    """Withholds the translation of an unanswered item while smart learning is on."""

    def __init__(self, prefs: PreferenceStore, resolver: ContentResolver | None = None):
        self.prefs = prefs
        self.resolver = resolver or ContentResolver(prefs)

    def recall_language(self) -> str:
        mode = self.prefs.content_mode
        return mode if mode in ("ar", "it") else self.prefs.ui_language

    def blocks(self, ar: str, it: str, answered: bool) -> list[ContentBlock]:
        if not self.prefs.smart_learning or answered:
            return self.resolver.resolve(ar, it)
        lang = self.recall_language()
        return [ContentBlock(ar if lang == "ar" else it, lang)]

    def reveal(self, ar: str, it: str, answered: bool) -> Optional[ContentBlock]:
        if not self.prefs.smart_learning or not answered or self.prefs.content_mode != "both":
            return None
        lang = opposite_language(self.prefs.ui_language)
        return ContentBlock(ar if lang == "ar" else it, lang, secondary=True)

    def plan(self, ar: str, it: str, answered: bool) -> RevealPlan:
        return RevealPlan(self.blocks(ar, it, answered), self.reveal(ar, it, answered))

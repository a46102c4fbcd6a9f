from __future__ import annotations

import json
import logging
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping

log = logging.getLogger(__name__)

UI_LANGUAGES = ("ar", "it")


def opposite_language(lang: str) -> str:
    return "it" if lang == "ar" else "ar"


def _freeze(node: Any) -> Any:
    if isinstance(node, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in node.items()})
    return node


def deep_get(tree: Mapping[str, Any], key: str) -> str | None:
    """Walk a dotted key through a locale tree.

    Returns None when a segment is missing or the final value is not a string.
    """
    cur: Any = tree
    for part in key.split("."):
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(part)
        if cur is None:
            return None
    return cur if isinstance(cur, str) else None


def flatten(tree: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    out: dict[str, str] = {}
    for k, v in tree.items():
        key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, Mapping):
            out.update(flatten(v, key))
        elif isinstance(v, str):
            out[key] = v
    return out


class LocaleCatalog:
    """Both locale trees, frozen once at load time."""

    def __init__(self, trees: Mapping[str, Mapping[str, Any]]):
        self._trees = {lang: _freeze(trees.get(lang) or {}) for lang in UI_LANGUAGES}

    @classmethod
    def from_package(cls, package: str = "app.locales") -> "LocaleCatalog":
        trees: dict[str, Any] = {}
        for lang in UI_LANGUAGES:
            try:
                raw = resources.files(package).joinpath(f"{lang}.json").read_text(encoding="utf-8")
                trees[lang] = json.loads(raw)
            except (OSError, ValueError) as e:
                log.warning("Failed to load locale %s: %s", lang, e)
                trees[lang] = {}
        return cls(trees)

    def tree(self, lang: str) -> Mapping[str, Any]:
        return self._trees.get(lang, self._trees["it"])

    def missing_keys(self) -> dict[str, list[str]]:
        """Keys present in the other tree but absent from this language's tree."""
        flat = {lang: flatten(self._trees[lang]) for lang in UI_LANGUAGES}
        return {
            lang: sorted(set(flat[opposite_language(lang)]) - set(flat[lang]))
            for lang in UI_LANGUAGES
        }

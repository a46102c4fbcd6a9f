from __future__ import annotations

import logging
import re
from typing import Callable, Mapping

from app.catalog import LocaleCatalog, deep_get, opposite_language

log = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")


def interpolate(text: str, vars: Mapping[str, str | int | float] | None = None) -> str:
    # unknown tokens stay in the output so missing variables are visible
    if not vars or not text:
        return text
    return TOKEN_RE.sub(lambda m: str(vars[m.group(1)]) if m.group(1) in vars else m.group(0), text)


class KeyResolver:
    """Translate dotted keys for whatever UI language is active right now.

    Lookup order: active language, then the opposite language, then "".
    The raw key is never returned.
    """

    def __init__(self, catalog: LocaleCatalog, current_language: Callable[[], str], debug: bool = False):
        self.catalog = catalog
        self.current_language = current_language
        self.debug = debug
        self._reported: set[str] = set()

    def lookup(self, key: str, lang: str) -> str:
        found = deep_get(self.catalog.tree(lang), key)
        if found is not None:
            return found
        found = deep_get(self.catalog.tree(opposite_language(lang)), key)
        if found is not None:
            return found
        if self.debug and key not in self._reported:
            self._reported.add(key)
            log.warning('[i18n] Missing key: "%s" in both ar and it', key)
        return ""

    def translate(self, key: str, vars: Mapping[str, str | int | float] | None = None) -> str:
        return interpolate(self.lookup(key, self.current_language()), vars)

    __call__ = translate

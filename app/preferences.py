from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from app.catalog import UI_LANGUAGES
from app.direction import DirectionalityController

log = logging.getLogger(__name__)

CONTENT_MODES = ("ar", "it", "both")
FIELDS = ("ui_language", "content_mode", "smart_learning")

DEFAULTS = {"ui_language": "it", "content_mode": "both", "smart_learning": False}

# keys in the persisted key-value store
STORAGE_KEYS = {"ui_language": "lang", "content_mode": "content_mode", "smart_learning": "smart_learning"}


@dataclass(frozen=True)
class PreferenceState:
    ui_language: str
    content_mode: str
    smart_learning: bool

    def as_dict(self) -> dict:
        return {"ui_language": self.ui_language, "content_mode": self.content_mode, "smart_learning": self.smart_learning}


@dataclass(frozen=True)
class UserSettings:
    """Preferences saved on a user profile. None means "not set"."""
    ui_language: Optional[str] = None
    content_mode: Optional[str] = None
    smart_learning: Optional[bool] = None

    @classmethod
    def from_record(cls, record: Any) -> "UserSettings":
        return cls(
            ui_language=getattr(record, "ui_language", None),
            content_mode=getattr(record, "content_mode", None),
            smart_learning=getattr(record, "smart_learning", None),
        )


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


def detect_language(hint: str | None) -> str:
    # "ar-SA" / "ar_EG" / "ar" -> ar, everything else -> it
    code = (hint or "").replace("_", "-").split("-")[0].strip().lower()
    return "ar" if code == "ar" else "it"


def validate(field: str, value: Any) -> Any:
    """Return value if it is legal for field, else None."""
    if field == "ui_language":
        return value if value in UI_LANGUAGES else None
    if field == "content_mode":
        return value if value in CONTENT_MODES else None
    if field == "smart_learning":
        return value if isinstance(value, bool) else None
    return None


def encode(field: str, value: Any) -> str:
    if field == "smart_learning":
        return "true" if value else "false"
    return str(value)


def decode(field: str, raw: Optional[str]) -> Any:
    if raw is None:
        return None
    if field == "smart_learning":
        return {"true": True, "false": False}.get(raw)
    return validate(field, raw)


Listener = Callable[[PreferenceState], None]


class PreferenceStore:
    """Owner of the session's ui_language / content_mode / smart_learning.

    Each field is resolved lazily the first time it is read, using the first
    tier that yields a valid value:

    1. the authenticated user's saved settings (non-null fields only)
    2. the persisted key-value store
    3. the runtime locale hint (ui_language only)
    4. DEFAULTS

    Setters update memory, move the document direction, write the persisted
    store, hand the full state to ``on_settings_change`` and finally notify
    subscribers. Failures of the store or the callback are logged and never
    undo the in-memory change.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        user_settings: UserSettings | None = None,
        locale_hint: str | None = None,
        on_settings_change: Listener | None = None,
        directionality: DirectionalityController | None = None,
    ):
        self.storage = storage
        self.user_settings = user_settings
        self.locale_hint = locale_hint
        self.on_settings_change = on_settings_change
        self.directionality = directionality
        self._values: dict[str, Any] = {}
        self._listeners: list[Listener] = []
        if directionality is not None:
            directionality.apply(self.ui_language)

    # -- reads --------------------------------------------------------------

    def _initial(self, field: str) -> Any:
        if self.user_settings is not None:
            value = validate(field, getattr(self.user_settings, field, None))
            if value is not None:
                return value
        value = decode(field, self._read(STORAGE_KEYS[field]))
        if value is not None:
            return value
        if field == "ui_language":
            return detect_language(self.locale_hint)
        return DEFAULTS[field]

    def _get(self, field: str) -> Any:
        if field not in self._values:
            self._values[field] = self._initial(field)
        return self._values[field]

    @property
    def ui_language(self) -> str:
        return self._get("ui_language")

    @property
    def content_mode(self) -> str:
        return self._get("content_mode")

    @property
    def smart_learning(self) -> bool:
        return self._get("smart_learning")

    @property
    def is_rtl(self) -> bool:
        return self.ui_language == "ar"

    def snapshot(self) -> PreferenceState:
        return PreferenceState(self.ui_language, self.content_mode, self.smart_learning)

    # -- writes -------------------------------------------------------------

    def set_ui_language(self, lang: str) -> PreferenceState:
        return self._update("ui_language", lang)

    def set_content_mode(self, mode: str) -> PreferenceState:
        return self._update("content_mode", mode)

    def set_smart_learning(self, enabled: bool) -> PreferenceState:
        return self._update("smart_learning", enabled)

    def _update(self, field: str, value: Any) -> PreferenceState:
        if validate(field, value) is None:
            log.warning("Ignoring invalid %s value %r", field, value)
            return self.snapshot()

        changed = self._get(field) != value
        self._values[field] = value
        if field == "ui_language" and self.directionality is not None:
            self.directionality.apply(value)
        self._write(STORAGE_KEYS[field], encode(field, value))

        state = self.snapshot()
        if changed:
            if self.on_settings_change is not None:
                try:
                    self.on_settings_change(state)
                except Exception:
                    log.exception("Settings change callback failed for %s", state)
            self._notify(state)
        return state

    def sync_user_settings(self, settings: UserSettings | None) -> PreferenceState:
        """Apply a settings record that arrived after startup (e.g. login).

        Non-null fields overwrite memory, null fields leave it alone. Nothing
        is written back to the persisted store or the profile.
        """
        self.user_settings = settings
        if settings is None:
            return self.snapshot()

        before = self.snapshot()
        for field in FIELDS:
            value = validate(field, getattr(settings, field, None))
            if value is not None:
                self._values[field] = value
        if self.directionality is not None:
            self.directionality.apply(self.ui_language)

        state = self.snapshot()
        if state != before:
            self._notify(state)
        return state

    # -- subscription -------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: PreferenceState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                log.exception("Preference subscriber %r failed", listener)

    # -- persisted store ----------------------------------------------------

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.storage.get(key)
        except Exception:
            log.exception("Could not read %s from preference storage", key)
            return None

    def _write(self, key: str, value: str) -> None:
        try:
            self.storage.set(key, value)
        except Exception:
            log.exception("Could not persist %s=%s", key, value)

from __future__ import annotations

from typing import Optional

from flask import current_app, g, request, session
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError

from app import db
from app.catalog import LocaleCatalog
from app.content import ContentBlock, ContentResolver, SmartRevealPolicy
from app.direction import DirectionalityController, DocumentAttributes
from app.preferences import PreferenceState, PreferenceStore, UserSettings
from app.translator import KeyResolver


class SessionStore:
    """Preference storage in the signed session cookie (per browser profile)."""

    def get(self, key: str) -> Optional[str]:
        value = session.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        session.permanent = True
        session[key] = value


def current_user_settings() -> UserSettings | None:
    if current_user and current_user.is_authenticated:
        return UserSettings.from_record(current_user)
    return None


def sync_profile(state: PreferenceState) -> None:
    if not current_user.is_authenticated:
        return
    current_user.ui_language = state.ui_language
    current_user.content_mode = state.content_mode
    current_user.smart_learning = state.smart_learning
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def get_preferences() -> PreferenceStore:
    if "preferences" not in g:
        g.document = DocumentAttributes()
        g.preferences = PreferenceStore(
            SessionStore(),
            user_settings=current_user_settings(),
            locale_hint=request.accept_languages.best,
            on_settings_change=sync_profile,
            directionality=DirectionalityController(g.document),
        )
    return g.preferences


def get_document() -> DocumentAttributes:
    get_preferences()
    return g.document


def get_lang() -> str:
    return get_preferences().ui_language


def set_lang(code: str) -> PreferenceState:
    return get_preferences().set_ui_language("ar" if code == "ar" else "it")


def t(key: str, **vars) -> str:
    return current_app.extensions["i18n"].translate(key, vars)


def resolve(ar: str, it: str) -> list[ContentBlock]:
    return ContentResolver(get_preferences()).resolve(ar or "", it or "")


def reveal_policy() -> SmartRevealPolicy:
    return SmartRevealPolicy(get_preferences())


def init_app(app) -> None:
    catalog = app.config.get("LOCALE_CATALOG")
    catalog = LocaleCatalog(catalog) if catalog is not None else LocaleCatalog.from_package()
    app.extensions["locale_catalog"] = catalog
    app.extensions["i18n"] = KeyResolver(catalog, get_lang, debug=app.config.get("I18N_DEBUG", False))

    @app.context_processor
    def inject_i18n():
        prefs = get_preferences()
        return {
            "t": t,
            "lang": prefs.ui_language,
            "dir": "rtl" if prefs.is_rtl else "ltr",
            "document": get_document(),
            "content_mode": prefs.content_mode,
            "smart_learning": prefs.smart_learning,
            "resolve": resolve,
        }

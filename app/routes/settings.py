from flask import Blueprint, render_template, abort, jsonify, redirect, request, url_for
from app.catalog import UI_LANGUAGES
from app.content import resolve_content
from app.i18n import get_preferences, get_document, t
from app.preferences import CONTENT_MODES
from app.utils import parse_bool, payload_value

bp = Blueprint("settings", __name__)

PREVIEW_AR = "إشارة وقوف"
PREVIEW_IT = "Segnale di stop"

def _state_payload():
    prefs = get_preferences()
    doc = get_document()
    data = prefs.snapshot().as_dict()
    data.update({"is_rtl": prefs.is_rtl, "document": {"lang": doc.lang, "dir": doc.dir}})
    return data

def _respond():
    # plain form posts come from the settings page itself
    if request.is_json:
        return jsonify(_state_payload())
    return redirect(url_for("settings.index"))

@bp.get("/")
def index():
    prefs = get_preferences()
    preview = resolve_content(PREVIEW_AR, PREVIEW_IT, prefs.content_mode, prefs.ui_language)
    direction_label = t("language.current_rtl") if prefs.is_rtl else t("language.current_ltr")
    return render_template(
        "settings.html",
        preview=preview,
        direction_label=direction_label,
        ui_languages=UI_LANGUAGES,
        content_modes=CONTENT_MODES,
    )

@bp.get("/state")
def state():
    return jsonify(_state_payload())

@bp.post("/ui-language")
def ui_language():
    value = payload_value()
    if value not in UI_LANGUAGES:
        abort(400, description="ui language must be one of: " + ", ".join(UI_LANGUAGES))
    get_preferences().set_ui_language(value)
    return _respond()

@bp.post("/content-mode")
def content_mode():
    value = payload_value()
    if value not in CONTENT_MODES:
        abort(400, description="content mode must be one of: " + ", ".join(CONTENT_MODES))
    get_preferences().set_content_mode(value)
    return _respond()

@bp.post("/smart-learning")
def smart_learning():
    enabled = parse_bool(payload_value())
    if enabled is None:
        abort(400, description="smart learning must be true or false")
    get_preferences().set_smart_learning(enabled)
    return _respond()

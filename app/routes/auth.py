from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app
from flask_login import login_user, logout_user, login_required, current_user
from app.i18n import get_preferences, t
from app.models import User
from app.preferences import UserSettings

bp = Blueprint("auth", __name__)

@bp.get("/")
def index():
    if current_user.is_authenticated:
        return redirect(url_for("settings.index"))
    return redirect(url_for("auth.login"))

@bp.route("/login", methods=["GET","POST"])
def login():
    if request.method == "GET":
        return render_template("login.html")

    email = (request.form.get("email") or "").strip().lower()
    pw = request.form.get("password") or ""
    if not email or not pw:
        flash(t("auth.fill_all"), "danger")
        return redirect(url_for("auth.login"))

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(pw):
        flash(t("auth.invalid_credentials"), "danger")
        return redirect(url_for("auth.login"))

    # built while still anonymous, from the device tiers only
    prefs = get_preferences()
    login_user(user)
    # saved profile settings win over whatever this device had so far
    state = prefs.sync_user_settings(UserSettings.from_record(user))
    current_app.logger.info("User %s logged in (ui=%s, content=%s)", user.id, state.ui_language, state.content_mode)
    return redirect(url_for("settings.index"))

@bp.get("/logout")
@login_required
def logout():
    logout_user()
    return redirect(url_for("auth.login"))

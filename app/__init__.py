import logging
import os
import sys
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
login_manager.login_view = "auth.login"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def _configure_logging(app: Flask) -> None:
    # app.logger and the engine module loggers share the "app" hierarchy
    logger = logging.getLogger("app")
    logger.setLevel(app.config["LOG_LEVEL"])
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)


def create_app(test_config: dict | None = None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object("app.config.Config")
    if test_config:
        app.config.update(test_config)

    os.makedirs(app.instance_path, exist_ok=True)
    _configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    from app.models import User

    @login_manager.user_loader
    def load_user(user_id: str):
        return db.session.get(User, int(user_id))

    from app import i18n
    i18n.init_app(app)

    from app.routes.auth import bp as auth_bp
    from app.routes.settings import bp as settings_bp
    from app.routes.study import bp as study_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(settings_bp, url_prefix="/settings")
    app.register_blueprint(study_bp, url_prefix="/study")

    @app.get("/lang/<code>")
    def lang_switch(code):
        i18n.set_lang(code)
        from flask import redirect, request
        return redirect(request.referrer or "/")

    from app.cli import register_commands
    register_commands(app)

    app.logger.info("App ready (locale debug=%s)", app.config.get("I18N_DEBUG"))
    return app
